"""
Liveness and readiness probes.

/api/health answers as long as the process serves requests.
/api/ready also needs a working database connection.
"""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.db.database import get_session, ping_database

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Probe result in the standard envelope."""

    success: bool = True
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    database: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Never touches the database."""
    return HealthResponse(message="API is running")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> HealthResponse:
    """Readiness probe. 503 while the database cannot be reached."""
    if await ping_database(session):
        return HealthResponse(message="API is ready", database="connected")

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(success=False, message="API is not ready", database="disconnected")
