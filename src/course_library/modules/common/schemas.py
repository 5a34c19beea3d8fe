"""Pydantic schemas shared by every endpoint."""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""

    success: bool = False
    error: str = Field(description="Human-readable error message")
    path: Optional[str] = Field(default=None, description="Request path, set for unmatched routes")
