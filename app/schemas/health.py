"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when the execution store answers."""

    status: str = Field(default="ok", description="Readiness status")
    database: str = Field(default="ok", description="Execution store status")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the execution store is unreachable (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    database: str = Field(default="unavailable", description="Execution store status")
    message: str = Field(..., description="Driver error summary")
