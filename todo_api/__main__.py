"""
Run the API server: python -m todo_api
"""
# Standard library imports
import logging

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings
from .main import app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
