"""
Health check endpoint.

The rarity core has no external dependencies, so liveness is the only check.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness check. Returns healthy if the service is running."""
    return HealthResponse(status="healthy")
