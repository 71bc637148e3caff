"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    EventSubscriptionType,
    ExecutionQueryProperty,
    SortDirection,
    VariableOperation,
    VariableType,
)
from app.domain.exceptions import (
    FlowQueryException,
    InvalidFilterException,
    InvalidSortException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "EventSubscriptionType",
    "ExecutionQueryProperty",
    "SortDirection",
    "VariableOperation",
    "VariableType",
    # Exceptions
    "FlowQueryException",
    "InvalidFilterException",
    "InvalidSortException",
    "ResourceNotFoundException",
    "ValidationException",
]
