"""Filter compiler: FilterRequest to a constrained ExecutionQuery.

Compilation runs in two phases. Every criterion is validated and resolved
into a plan first; the query builder is only created and constrained once
the whole request is known to be valid, so a bad criterion never leaves a
partially constrained query behind.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, assert_never

from app.application.dtos.execution import FilterRequest, VariableCriterion
from app.domain.enums import VariableOperation
from app.domain.exceptions import InvalidFilterException

if TYPE_CHECKING:
    from app.application.interfaces.queries import (
        ExecutionQuery,
        ExecutionQueryFactory,
        IVariableValueResolver,
    )

logger = logging.getLogger(__name__)

_IGNORE_CASE_OPERATIONS = frozenset(
    {VariableOperation.EQUALS_IGNORE_CASE, VariableOperation.NOT_EQUALS_IGNORE_CASE}
)

_VALUE_ONLY_MESSAGE = (
    "Value-only query (without a variable-name) is only supported "
    "when using 'equals' operation."
)

# FilterRequest attribute -> ExecutionQuery method
_SCALAR_CONSTRAINTS: tuple[tuple[str, str], ...] = (
    ("id", "execution_id"),
    ("process_instance_id", "process_instance_id"),
    ("process_definition_key", "process_definition_key"),
    ("process_definition_id", "process_definition_id"),
    ("process_business_key", "process_instance_business_key"),
    ("activity_id", "activity_id"),
    ("parent_id", "parent_id"),
    ("message_event_subscription_name", "message_event_subscription_name"),
    ("signal_event_subscription_name", "signal_event_subscription_name"),
)


class VariableScope(Protocol):
    """Variable constraints for one scope (execution or process instance)."""

    def equals(self, name: str, value: Any) -> None: ...

    def equals_any(self, value: Any) -> None: ...

    def equals_ignore_case(self, name: str, value: str) -> None: ...

    def not_equals(self, name: str, value: Any) -> None: ...

    def not_equals_ignore_case(self, name: str, value: str) -> None: ...


class ExecutionVariableScope:
    """Constraints on variables local to the execution."""

    def __init__(self, query: ExecutionQuery) -> None:
        self.query = query

    def equals(self, name: str, value: Any) -> None:
        self.query.variable_value_equals(name, value)

    def equals_any(self, value: Any) -> None:
        self.query.variable_value_equals(None, value)

    def equals_ignore_case(self, name: str, value: str) -> None:
        self.query.variable_value_equals_ignore_case(name, value)

    def not_equals(self, name: str, value: Any) -> None:
        self.query.variable_value_not_equals(name, value)

    def not_equals_ignore_case(self, name: str, value: str) -> None:
        self.query.variable_value_not_equals_ignore_case(name, value)


class ProcessInstanceVariableScope:
    """Constraints on variables of the execution's process instance."""

    def __init__(self, query: ExecutionQuery) -> None:
        self.query = query

    def equals(self, name: str, value: Any) -> None:
        self.query.process_variable_value_equals(name, value)

    def equals_any(self, value: Any) -> None:
        self.query.process_variable_value_equals(None, value)

    def equals_ignore_case(self, name: str, value: str) -> None:
        self.query.process_variable_value_equals_ignore_case(name, value)

    def not_equals(self, name: str, value: Any) -> None:
        self.query.process_variable_value_not_equals(name, value)

    def not_equals_ignore_case(self, name: str, value: str) -> None:
        self.query.process_variable_value_not_equals_ignore_case(name, value)


@dataclass(frozen=True)
class VariableConstraint:
    """Validated variable criterion: parsed operation and resolved value."""

    operation: VariableOperation
    name: str | None
    value: Any


def apply_variable_constraint(scope: VariableScope, constraint: VariableConstraint) -> None:
    """Apply one constraint to a scope.

    Raises:
        InvalidFilterException: If a name-less constraint uses anything but equals.
    """
    name, value = constraint.name, constraint.value
    if name is None:
        if constraint.operation is not VariableOperation.EQUALS:
            raise InvalidFilterException(_VALUE_ONLY_MESSAGE)
        scope.equals_any(value)
        return
    match constraint.operation:
        case VariableOperation.EQUALS:
            scope.equals(name, value)
        case VariableOperation.EQUALS_IGNORE_CASE:
            scope.equals_ignore_case(name, value)
        case VariableOperation.NOT_EQUALS:
            scope.not_equals(name, value)
        case VariableOperation.NOT_EQUALS_IGNORE_CASE:
            scope.not_equals_ignore_case(name, value)
        case _:
            assert_never(constraint.operation)


class FilterCompiler:
    """Translate a FilterRequest into calls on an ExecutionQuery.

    Holds no per-request state; query_factory builds a fresh query per call.
    """

    def __init__(
        self,
        query_factory: ExecutionQueryFactory,
        resolver: IVariableValueResolver,
    ) -> None:
        self.query_factory = query_factory
        self.resolver = resolver

    def compile(self, request: FilterRequest) -> ExecutionQuery:
        """Return a query constrained by every filter in request.

        Raises:
            InvalidFilterException: If any variable criterion is malformed;
                no query is built in that case.
        """
        scalars = [
            (method, getattr(request, attr))
            for attr, method in _SCALAR_CONSTRAINTS
            if getattr(request, attr) is not None
        ]
        execution_plan = self.plan_variables(request.variables)
        process_plan = self.plan_variables(request.process_instance_variables)

        query = self.query_factory()
        for method, value in scalars:
            getattr(query, method)(value)
        execution_scope = ExecutionVariableScope(query)
        for constraint in execution_plan:
            apply_variable_constraint(execution_scope, constraint)
        process_scope = ProcessInstanceVariableScope(query)
        for constraint in process_plan:
            apply_variable_constraint(process_scope, constraint)

        logger.debug(
            "Compiled execution query: %d scalar, %d execution variable, %d process variable constraints",
            len(scalars),
            len(execution_plan),
            len(process_plan),
        )
        return query

    def plan_variables(
        self, criteria: Sequence[VariableCriterion]
    ) -> list[VariableConstraint]:
        """Validate and resolve criteria in order; fail on the first bad one."""
        return [self._plan_variable(c) for c in criteria]

    def _plan_variable(self, criterion: VariableCriterion) -> VariableConstraint:
        name = criterion.name
        if criterion.operation is None:
            raise InvalidFilterException(
                f"Variable operation is missing for variable: {name}", name
            )
        if criterion.value is None:
            raise InvalidFilterException(
                f"Variable value is missing for variable: {name}", name
            )
        try:
            operation = VariableOperation.parse(criterion.operation)
        except ValueError:
            raise InvalidFilterException(
                f"Unsupported variable query operation: {criterion.operation}", name
            ) from None

        value = self.resolver.resolve(criterion.value, criterion.type)
        if value is None:
            raise InvalidFilterException(
                f"Variable value is missing for variable: {name}", name
            )

        # A value-only query is only possible using equals
        if name is None and operation is not VariableOperation.EQUALS:
            raise InvalidFilterException(_VALUE_ONLY_MESSAGE)
        if operation in _IGNORE_CASE_OPERATIONS and not isinstance(value, str):
            raise InvalidFilterException(
                "Only string variable values are supported when ignoring casing, "
                f"but was: {type(value).__name__}",
                name,
            )
        return VariableConstraint(operation=operation, name=name, value=value)
