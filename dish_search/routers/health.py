"""
Health check router.
"""
from fastapi import APIRouter

from dish_search.schemas.search import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check - always returns OK."""
    return {"status": "ok", "message": "Server is running"}
