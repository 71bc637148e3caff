"""Domain exceptions for the execution query service.

Defines domain-level exceptions that represent client input problems and
missing resources. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class FlowQueryException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FlowQueryException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidFilterException(FlowQueryException):
    """Raised when a filter criterion is malformed, contradictory or unsupported."""

    def __init__(self, message: str, variable: str | None = None) -> None:
        """Initialize with message and the offending variable name, if any.

        Args:
            message: Description of the filter problem.
            variable: Optional variable name the criterion refers to.
        """
        details = {"variable": variable} if variable else {}
        super().__init__(message, "INVALID_FILTER", details)


class InvalidSortException(FlowQueryException):
    """Raised when a sort field or order is not supported."""

    def __init__(self, message: str, allowed: list[str] | None = None) -> None:
        details: dict[str, Any] = {}
        if allowed:
            details["allowed"] = allowed
        super().__init__(message, "INVALID_SORT", details)


class ResourceNotFoundException(FlowQueryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'execution').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
