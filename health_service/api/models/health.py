"""Health check models."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok"] = Field(default="ok", description="Service health status")
    version: str = Field(..., min_length=1, description="Deployed build identifier")
