"""Variable value resolver: wire values to engine-native typed values.

Clients send variable values as JSON scalars, optionally with a declared
type (e.g. {"value": "2024-01-31T10:00:00Z", "type": "date"}). Without a
type the JSON scalar is used as-is.
"""

from datetime import datetime
from typing import Any

from app.domain.enums import VariableType
from app.domain.exceptions import InvalidFilterException
from app.shared.utils.datetime import ensure_utc

_INTEGER_RANGES: dict[VariableType, tuple[int, int]] = {
    VariableType.SHORT: (-(2**15), 2**15 - 1),
    VariableType.INTEGER: (-(2**31), 2**31 - 1),
    VariableType.LONG: (-(2**63), 2**63 - 1),
}

_BOOLEAN_STRINGS = {"true": True, "false": False}


def _type_label(value: Any) -> str:
    return type(value).__name__


class VariableValueResolver:
    """Convert client-submitted variable values into typed Python values.

    Typed values are str, int, float, bool and timezone-aware datetime.
    Failures raise InvalidFilterException so callers can map them to 4xx.
    """

    def resolve(self, value: Any, type_name: str | None = None) -> Any:
        """Return the typed value for a wire value and optional declared type.

        Args:
            value: JSON scalar from the request (None stays None).
            type_name: Optional declared type (string, short, integer, long,
                double, boolean, date).

        Raises:
            InvalidFilterException: Unknown type or value not convertible.
        """
        if value is None:
            return None
        if type_name is None:
            if isinstance(value, int) and not isinstance(value, bool):
                return self._check_range(value, VariableType.LONG)
            if isinstance(value, (str, bool, float)):
                return value
            raise InvalidFilterException(
                f"Unsupported variable value: {_type_label(value)}"
            )
        try:
            var_type = VariableType(type_name)
        except ValueError:
            raise InvalidFilterException(
                f"Variable type '{type_name}' is not supported"
            ) from None

        if var_type is VariableType.STRING:
            if isinstance(value, (dict, list)):
                raise InvalidFilterException(
                    f"Cannot convert {_type_label(value)} to string"
                )
            return str(value)
        if var_type in _INTEGER_RANGES:
            return self._to_integer(value, var_type)
        if var_type is VariableType.DOUBLE:
            return self._to_double(value)
        if var_type is VariableType.BOOLEAN:
            return self._to_boolean(value)
        return self._to_date(value)

    @staticmethod
    def _to_integer(value: Any, var_type: VariableType) -> int:
        if isinstance(value, bool):
            raise InvalidFilterException(f"Cannot convert boolean to {var_type.value}")
        try:
            if isinstance(value, float):
                if not value.is_integer():
                    raise ValueError(value)
                number = int(value)
            else:
                number = int(value)
        except (TypeError, ValueError):
            raise InvalidFilterException(
                f"Cannot convert '{value}' to {var_type.value}"
            ) from None
        return VariableValueResolver._check_range(number, var_type)

    @staticmethod
    def _check_range(number: int, var_type: VariableType) -> int:
        low, high = _INTEGER_RANGES[var_type]
        if not low <= number <= high:
            raise InvalidFilterException(f"Value {number} out of range for {var_type.value}")
        return number

    @staticmethod
    def _to_double(value: Any) -> float:
        if isinstance(value, bool):
            raise InvalidFilterException("Cannot convert boolean to double")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise InvalidFilterException(f"Cannot convert '{value}' to double") from None

    @staticmethod
    def _to_boolean(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _BOOLEAN_STRINGS:
            return _BOOLEAN_STRINGS[value.strip().lower()]
        raise InvalidFilterException(f"Cannot convert '{value}' to boolean")

    @staticmethod
    def _to_date(value: Any) -> datetime:
        if isinstance(value, datetime):
            return ensure_utc(value)
        if not isinstance(value, str):
            raise InvalidFilterException(
                f"Date values must be ISO-8601 strings, got {_type_label(value)}"
            )
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            raise InvalidFilterException(f"Cannot convert '{value}' to date") from None
        return ensure_utc(parsed)
