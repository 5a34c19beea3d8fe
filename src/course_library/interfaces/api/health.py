"""Liveness probe."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from .dependencies import Storage

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "OK"
    timestamp: str = Field(description="Current server time, ISO-8601 UTC")
    files_root: str = Field(alias="filesRoot", description="Configured storage root")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Simple health check endpoint for monitoring and container orchestration.",
    responses={
        200: {"description": "Service is up"},
    },
)
async def health_check(storage: Storage) -> HealthResponse:
    """Health check endpoint for Docker health checks."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(timestamp=timestamp, files_root=str(storage.path))
