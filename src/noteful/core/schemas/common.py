"""
Shared response schemas - error bodies, health
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorMessage(BaseModel):
    message: str = Field(description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error body for validation, not-found and server errors."""

    error: ErrorMessage

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": {"message": "Note doesn't exist"}}}
    )


class UnauthorizedResponse(BaseModel):
    """Error body returned by the auth gate."""

    error: str = Field(description="Always 'Unauthorized request'")

    model_config = ConfigDict(json_schema_extra={"example": {"error": "Unauthorized request"}})


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {"database": {"status": "healthy", "response_time_ms": 15}},
            }
        }
    )
