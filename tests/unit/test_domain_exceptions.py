"""Tests for domain exceptions (error_code, message, details)."""

import pytest

from app.domain.exceptions import (
    FlowQueryException,
    InvalidFilterException,
    InvalidSortException,
    ResourceNotFoundException,
    ValidationException,
)


def test_flowquery_exception_default_error_code() -> None:
    """Base FlowQueryException uses class name as error_code when not provided."""
    exc = FlowQueryException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FlowQueryException"
    assert exc.details == {}


def test_flowquery_exception_custom_error_code_and_details() -> None:
    """FlowQueryException accepts custom error_code and details."""
    exc = FlowQueryException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.message == "Oops"
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_to_dict() -> None:
    exc = FlowQueryException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="start")
    assert exc.message == "Invalid format"
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "start"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {}


def test_invalid_filter_exception() -> None:
    exc = InvalidFilterException("Variable value is missing for variable: x", "x")
    assert exc.error_code == "INVALID_FILTER"
    assert exc.details == {"variable": "x"}


def test_invalid_filter_exception_without_variable() -> None:
    exc = InvalidFilterException("bad")
    assert exc.details == {}


def test_invalid_sort_exception() -> None:
    exc = InvalidSortException("bad sort", allowed=["a", "b"])
    assert exc.error_code == "INVALID_SORT"
    assert exc.details == {"allowed": ["a", "b"]}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("execution", "e-456")
    assert "execution" in exc.message and "e-456" in exc.message
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "execution", "resource_id": "e-456"}


def test_exception_is_raiseable() -> None:
    """All exceptions can be raised and caught as FlowQueryException."""
    with pytest.raises(FlowQueryException) as exc_info:
        raise InvalidFilterException("Bad input", "x")
    assert exc_info.value.error_code == "INVALID_FILTER"
