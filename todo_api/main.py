# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

# Local application imports
from .api.v1 import auth_router, task_router, health_router
from .application.validation import format_errors
from .core.config import get_settings
from .infrastructure.db.mongo_connection import initialize_database, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB and ensures indexes on startup, closes the client on
    shutdown. An unreachable database is logged but does not stop the server;
    requests then fail individually.
    """
    try:
        await initialize_database()
    except PyMongoError as e:
        logger.error(f"Failed to initialize MongoDB: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


async def request_validation_exception_handler(
    request: Request,
    exception: RequestValidationError,
) -> JSONResponse:
    """Report unparsable request bodies in the same shape as field validation errors"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": format_errors(exception.errors())},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()

    application = FastAPI(
        title="Task Tracker API",
        version="1.0.0",
        description="User registration/login and per-user task CRUD",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(
        RequestValidationError,
        request_validation_exception_handler,
    )

    # Register API routers
    application.include_router(auth_router, prefix="/api")
    application.include_router(task_router, prefix="/api")
    application.include_router(health_router)

    return application


# Create application instance
app = create_application()
