# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness probe; does not touch the database"""
    return {"status": "ok"}
