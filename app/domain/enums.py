"""Domain enumerations for the execution query service.

Enums represent fixed sets of domain values (variable operations, sort
direction, orderable execution properties, variable and subscription types).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class VariableOperation(_ValuesMixin, str, Enum):
    """Comparison operator of a variable criterion.

    Wire values are the camelCase operation names clients send.
    """

    EQUALS = "equals"
    EQUALS_IGNORE_CASE = "equalsIgnoreCase"
    NOT_EQUALS = "notEquals"
    NOT_EQUALS_IGNORE_CASE = "notEqualsIgnoreCase"

    @classmethod
    def parse(cls, raw: str) -> "VariableOperation":
        """Return the member for a wire value or member name.

        Raises:
            ValueError: If raw matches neither a value nor a name.
        """
        try:
            return cls(raw)
        except ValueError:
            if raw in cls.__members__:
                return cls[raw]
            raise


class SortDirection(_ValuesMixin, str, Enum):
    """Sort order applied to a query."""

    ASC = "asc"
    DESC = "desc"


class ExecutionQueryProperty(_ValuesMixin, str, Enum):
    """Execution columns the query builder knows how to order by."""

    PROCESS_DEFINITION_ID = "process_definition_id"
    PROCESS_DEFINITION_KEY = "process_definition_key"
    PROCESS_INSTANCE_ID = "process_instance_id"


class VariableType(_ValuesMixin, str, Enum):
    """Declared type of a runtime variable (stored alongside its value)."""

    STRING = "string"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    DATE = "date"


class EventSubscriptionType(_ValuesMixin, str, Enum):
    """Kind of event an execution is subscribed to."""

    MESSAGE = "message"
    SIGNAL = "signal"
