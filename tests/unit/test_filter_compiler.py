"""Unit tests for FilterCompiler (scalar and variable criteria -> query calls)."""

from datetime import UTC, datetime
from typing import Any

import pytest

from app.application.dtos.execution import FilterRequest, VariableCriterion
from app.application.services.variable_value_resolver import VariableValueResolver
from app.application.use_cases.executions import (
    ExecutionVariableScope,
    FilterCompiler,
    VariableConstraint,
)
from app.application.use_cases.executions.filter_compiler import apply_variable_constraint
from app.domain.enums import VariableOperation
from app.domain.exceptions import InvalidFilterException


class RecordingQuery:
    """ExecutionQuery double that records every constraint call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __getattr__(self, method: str):
        def record(*args: Any) -> "RecordingQuery":
            self.calls.append((method, *args))
            return self

        return record


class Factory:
    """Query factory that remembers the queries it built."""

    def __init__(self) -> None:
        self.built: list[RecordingQuery] = []

    def __call__(self) -> RecordingQuery:
        query = RecordingQuery()
        self.built.append(query)
        return query


@pytest.fixture
def factory() -> Factory:
    return Factory()


@pytest.fixture
def compiler(factory: Factory) -> FilterCompiler:
    return FilterCompiler(query_factory=factory, resolver=VariableValueResolver())


def _var(operation: str | None, value: Any, name: str | None = None, type: str | None = None):
    return VariableCriterion(operation=operation, value=value, name=name, type=type)


class TestScalarFilters:
    """Scalar fields map one-to-one to query constraints."""

    def test_empty_request_builds_unconstrained_query(self, compiler, factory) -> None:
        query = compiler.compile(FilterRequest())
        assert query is factory.built[0]
        assert query.calls == []

    def test_each_present_field_applied_once(self, compiler) -> None:
        query = compiler.compile(
            FilterRequest(
                id="e1",
                process_instance_id="p1",
                process_definition_key="invoice",
                process_definition_id="invoice:1:4",
                process_business_key="INV-1",
                activity_id="review",
                parent_id="e0",
                message_event_subscription_name="paid",
                signal_event_subscription_name="cancel",
            )
        )
        assert query.calls == [
            ("execution_id", "e1"),
            ("process_instance_id", "p1"),
            ("process_definition_key", "invoice"),
            ("process_definition_id", "invoice:1:4"),
            ("process_instance_business_key", "INV-1"),
            ("activity_id", "review"),
            ("parent_id", "e0"),
            ("message_event_subscription_name", "paid"),
            ("signal_event_subscription_name", "cancel"),
        ]

    def test_absent_fields_not_applied(self, compiler) -> None:
        query = compiler.compile(FilterRequest(process_definition_key="invoice"))
        assert query.calls == [("process_definition_key", "invoice")]

    def test_fresh_query_per_compile(self, compiler, factory) -> None:
        first = compiler.compile(FilterRequest(id="a"))
        second = compiler.compile(FilterRequest(id="b"))
        assert first is not second
        assert second.calls == [("execution_id", "b")]


class TestVariableFilters:
    """Variable criteria map to the operation and scope requested."""

    def test_equals_with_name(self, compiler) -> None:
        query = compiler.compile(FilterRequest(variables=(_var("equals", 100, "amount"),)))
        assert query.calls == [("variable_value_equals", "amount", 100)]

    def test_value_only_equals(self, compiler) -> None:
        query = compiler.compile(FilterRequest(variables=(_var("equals", "EUR"),)))
        assert query.calls == [("variable_value_equals", None, "EUR")]

    def test_all_operations_execution_scope(self, compiler) -> None:
        query = compiler.compile(
            FilterRequest(
                variables=(
                    _var("equals", "a", "v1"),
                    _var("equalsIgnoreCase", "B", "v2"),
                    _var("notEquals", 3, "v3"),
                    _var("notEqualsIgnoreCase", "d", "v4"),
                )
            )
        )
        assert query.calls == [
            ("variable_value_equals", "v1", "a"),
            ("variable_value_equals_ignore_case", "v2", "B"),
            ("variable_value_not_equals", "v3", 3),
            ("variable_value_not_equals_ignore_case", "v4", "d"),
        ]

    def test_all_operations_process_instance_scope(self, compiler) -> None:
        query = compiler.compile(
            FilterRequest(
                process_instance_variables=(
                    _var("equals", True),
                    _var("equalsIgnoreCase", "x", "v2"),
                    _var("notEquals", 1.5, "v3"),
                    _var("notEqualsIgnoreCase", "y", "v4"),
                )
            )
        )
        assert query.calls == [
            ("process_variable_value_equals", None, True),
            ("process_variable_value_equals_ignore_case", "v2", "x"),
            ("process_variable_value_not_equals", "v3", 1.5),
            ("process_variable_value_not_equals_ignore_case", "v4", "y"),
        ]

    def test_member_name_accepted_as_operation(self, compiler) -> None:
        query = compiler.compile(
            FilterRequest(variables=(_var("NOT_EQUALS", "x", "v"),))
        )
        assert query.calls == [("variable_value_not_equals", "v", "x")]

    def test_declared_type_resolves_value(self, compiler) -> None:
        query = compiler.compile(
            FilterRequest(
                variables=(
                    _var("equals", "2024-01-31T10:00:00Z", "due", type="date"),
                    _var("equals", "42", "count", type="long"),
                )
            )
        )
        assert query.calls == [
            ("variable_value_equals", "due", datetime(2024, 1, 31, 10, tzinfo=UTC)),
            ("variable_value_equals", "count", 42),
        ]

    def test_scalars_then_execution_then_process_variables(self, compiler) -> None:
        query = compiler.compile(
            FilterRequest(
                activity_id="review",
                variables=(_var("equals", 1, "a"),),
                process_instance_variables=(_var("equals", 2, "b"),),
            )
        )
        assert [c[0] for c in query.calls] == [
            "activity_id",
            "variable_value_equals",
            "process_variable_value_equals",
        ]


class TestInvalidVariableFilters:
    """Malformed criteria raise InvalidFilterException and build no query."""

    def test_missing_operation(self, compiler, factory) -> None:
        with pytest.raises(InvalidFilterException, match="operation is missing for variable: amount"):
            compiler.compile(FilterRequest(variables=(_var(None, 1, "amount"),)))
        assert factory.built == []

    def test_missing_value(self, compiler, factory) -> None:
        with pytest.raises(InvalidFilterException, match="value is missing for variable: amount"):
            compiler.compile(FilterRequest(variables=(_var("equals", None, "amount"),)))
        assert factory.built == []

    def test_unknown_operation(self, compiler, factory) -> None:
        with pytest.raises(InvalidFilterException, match="Unsupported variable query operation: like"):
            compiler.compile(FilterRequest(variables=(_var("like", "x", "v"),)))
        assert factory.built == []

    @pytest.mark.parametrize(
        "operation", ["equalsIgnoreCase", "notEquals", "notEqualsIgnoreCase"]
    )
    def test_value_only_requires_equals(self, compiler, factory, operation: str) -> None:
        with pytest.raises(InvalidFilterException, match="only supported when using 'equals'"):
            compiler.compile(FilterRequest(variables=(_var(operation, "x"),)))
        assert factory.built == []

    @pytest.mark.parametrize("operation", ["equalsIgnoreCase", "notEqualsIgnoreCase"])
    def test_ignore_case_requires_string(self, compiler, operation: str) -> None:
        with pytest.raises(InvalidFilterException, match="Only string variable values") as exc_info:
            compiler.compile(
                FilterRequest(process_instance_variables=(_var(operation, 5, "amount"),))
            )
        assert exc_info.value.details == {"variable": "amount"}

    def test_unresolvable_value(self, compiler) -> None:
        with pytest.raises(InvalidFilterException):
            compiler.compile(
                FilterRequest(variables=(_var("equals", "abc", "n", type="integer"),))
            )

    def test_bad_criterion_after_good_ones_builds_nothing(self, compiler, factory) -> None:
        request = FilterRequest(
            id="e1",
            variables=(_var("equals", 1, "a"),),
            process_instance_variables=(_var("bogus", 1, "b"),),
        )
        with pytest.raises(InvalidFilterException):
            compiler.compile(request)
        assert factory.built == []

    def test_error_code(self, compiler) -> None:
        with pytest.raises(InvalidFilterException) as exc_info:
            compiler.compile(FilterRequest(variables=(_var(None, 1, "amount"),)))
        assert exc_info.value.error_code == "INVALID_FILTER"


class TestApplyVariableConstraint:
    """Direct application of constraints built outside the compiler."""

    def test_name_less_equals_is_value_only(self) -> None:
        query = RecordingQuery()
        apply_variable_constraint(
            ExecutionVariableScope(query),
            VariableConstraint(operation=VariableOperation.EQUALS, name=None, value=7),
        )
        assert query.calls == [("variable_value_equals", None, 7)]

    @pytest.mark.parametrize(
        "operation",
        [
            VariableOperation.EQUALS_IGNORE_CASE,
            VariableOperation.NOT_EQUALS,
            VariableOperation.NOT_EQUALS_IGNORE_CASE,
        ],
    )
    def test_name_less_other_operations_rejected(self, operation: VariableOperation) -> None:
        query = RecordingQuery()
        with pytest.raises(InvalidFilterException, match="only supported when using 'equals'"):
            apply_variable_constraint(
                ExecutionVariableScope(query),
                VariableConstraint(operation=operation, name=None, value="x"),
            )
        assert query.calls == []
