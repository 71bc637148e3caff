"""Application DTOs (no ORM dependency)."""

from app.application.dtos.execution import (
    ExecutionView,
    FilterRequest,
    Page,
    SortRequest,
    VariableCriterion,
    VariableToSet,
    VariableView,
)

__all__ = [
    "ExecutionView",
    "FilterRequest",
    "Page",
    "SortRequest",
    "VariableCriterion",
    "VariableToSet",
    "VariableView",
]
