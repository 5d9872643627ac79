"""
Health check endpoint.

Provides a liveness probe.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from forestshare.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    app_version: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running, with the version stamped
    onto exported payloads.
    """
    return HealthResponse(status="healthy", app_version=settings.app_version)
