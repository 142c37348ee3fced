"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health when the database answers."""

    status: str = Field(default="OK", description="Service status")
    message: str = Field(default="Server is running")
    database: str = Field(..., description="OK or ERROR")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check")


class HealthErrorResponse(BaseModel):
    """Response for GET /health when the database check fails (500)."""

    status: str = Field(default="ERROR", description="Service status")
    message: str = Field(default="Server is running but some services are unavailable")
    error: str = Field(..., description="Reason the check failed")
    timestamp: str
