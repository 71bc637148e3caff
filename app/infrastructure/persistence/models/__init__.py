"""ORM models. Import here so Base.metadata knows every table."""

from app.infrastructure.persistence.models.execution import (
    Execution,
    ExecutionEventSubscription,
    ExecutionVariable,
)

__all__ = [
    "Execution",
    "ExecutionEventSubscription",
    "ExecutionVariable",
]
