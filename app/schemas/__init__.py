"""API request/response schemas (pydantic)."""

from app.schemas.execution import (
    ExecutionListResponse,
    ExecutionQueryRequest,
    ExecutionResponse,
    QueryVariable,
    VariableRequest,
    VariableResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "ExecutionListResponse",
    "ExecutionQueryRequest",
    "ExecutionResponse",
    "HealthResponse",
    "QueryVariable",
    "VariableRequest",
    "VariableResponse",
]
