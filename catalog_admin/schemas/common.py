"""Common schemas for API responses."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = Field(default=False)
    error: str = Field(description="Error message")
    error_type: str = Field(description="Error type/class name")

    model_config = {"extra": "forbid"}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Health status (healthy, degraded)")
    version: str = Field(description="Service version")
    environment: str = Field(description="Environment name")
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual health checks")

    model_config = {"extra": "forbid"}


class TestDataResult(BaseModel):
    """Outcome of seeding sample categories and products."""

    success: bool = Field(description="Whether seeding completed")
    message: str | None = Field(default=None, description="Summary when successful")
    error: str | None = Field(default=None, description="Error message if failed")

    model_config = {"extra": "forbid"}


def coerce_form_id(value: Any) -> int | None:
    """Hidden id field: blank means absent, garbage never matches a real id."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
