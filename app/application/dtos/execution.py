"""DTOs for execution queries (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.domain.enums import SortDirection


@dataclass(frozen=True)
class VariableCriterion:
    """Single variable filter as sent by the client.

    operation and value are kept loosely typed; FilterCompiler validates them.
    type is the optional declared variable type handed to the value resolver.
    """

    operation: str | None
    value: Any
    name: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class FilterRequest:
    """Execution filter (read-model input). Absent fields match anything."""

    id: str | None = None
    process_instance_id: str | None = None
    process_definition_key: str | None = None
    process_definition_id: str | None = None
    process_business_key: str | None = None
    activity_id: str | None = None
    parent_id: str | None = None
    message_event_subscription_name: str | None = None
    signal_event_subscription_name: str | None = None
    variables: tuple[VariableCriterion, ...] = ()
    process_instance_variables: tuple[VariableCriterion, ...] = ()


@dataclass(frozen=True)
class SortRequest:
    """Sort field (logical name), direction and pagination bounds."""

    field: str
    direction: SortDirection = SortDirection.ASC
    offset: int = 0
    limit: int = 10


@dataclass(frozen=True)
class Page[T]:
    """One page of results; total counts all matches ignoring pagination."""

    items: list[T]
    total: int
    offset: int
    size: int


@dataclass(frozen=True)
class ExecutionView:
    """Execution read-model returned by queries and lookups."""

    id: str
    process_instance_id: str
    process_definition_id: str
    process_definition_key: str
    parent_id: str | None = None
    business_key: str | None = None
    activity_id: str | None = None
    suspended: bool = False


@dataclass(frozen=True)
class VariableToSet:
    """Variable write input: name plus already resolved value and type."""

    name: str
    type: str
    value: Any


@dataclass(frozen=True)
class VariableView:
    """Stored variable of an execution."""

    execution_id: str
    name: str
    type: str
    value: str | int | float | bool | datetime | None
