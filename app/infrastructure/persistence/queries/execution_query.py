"""SQLAlchemy implementation of ExecutionQuery.

Constraints accumulate as WHERE clauses (all ANDed). Variable constraints
are EXISTS subqueries on execution_variable, correlated on execution.id
for execution-local variables and on execution.process_instance_id for
process-instance variables.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Self

from sqlalchemy import ColumnElement, and_, func, not_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, aliased

from app.application.dtos.execution import ExecutionView
from app.domain.enums import (
    EventSubscriptionType,
    ExecutionQueryProperty,
    SortDirection,
    VariableType,
)
from app.domain.exceptions import InvalidFilterException
from app.infrastructure.persistence.models.execution import (
    Execution,
    ExecutionEventSubscription,
    ExecutionVariable,
)
from app.shared.utils.datetime import to_timestamp_ms

_INTEGER_TYPES = [VariableType.SHORT.value, VariableType.INTEGER.value, VariableType.LONG.value]

_ORDER_COLUMNS: dict[ExecutionQueryProperty, InstrumentedAttribute[str]] = {
    ExecutionQueryProperty.PROCESS_DEFINITION_ID: Execution.process_definition_id,
    ExecutionQueryProperty.PROCESS_DEFINITION_KEY: Execution.process_definition_key,
    ExecutionQueryProperty.PROCESS_INSTANCE_ID: Execution.process_instance_id,
}


def to_execution_view(row: Execution) -> ExecutionView:
    """Map an Execution row to its read-model."""
    return ExecutionView(
        id=row.id,
        process_instance_id=row.process_instance_id,
        process_definition_id=row.process_definition_id,
        process_definition_key=row.process_definition_key,
        parent_id=row.parent_id,
        business_key=row.business_key,
        activity_id=row.activity_id,
        suspended=row.suspended,
    )


def _typed_value(value: Any) -> tuple[ColumnElement[bool], ColumnElement[bool]]:
    """(type clause, stored-value equality) for a resolved value."""
    var = ExecutionVariable
    if isinstance(value, bool):
        return var.type == VariableType.BOOLEAN.value, var.long_value == int(value)
    if isinstance(value, int):
        return var.type.in_(_INTEGER_TYPES), var.long_value == value
    if isinstance(value, float):
        return var.type == VariableType.DOUBLE.value, var.double_value == value
    if isinstance(value, str):
        return var.type == VariableType.STRING.value, var.text_value == value
    if isinstance(value, datetime):
        return var.type == VariableType.DATE.value, var.long_value == to_timestamp_ms(value)
    raise InvalidFilterException(f"Unsupported variable value: {type(value).__name__}")


def _value_matches(value: Any, *, equal: bool = True) -> ColumnElement[bool]:
    """Typed (in)equality: the variable type must match in both cases."""
    type_clause, same_value = _typed_value(value)
    return and_(type_clause, same_value if equal else not_(same_value))


def _ignore_case_matches(value: str, *, equal: bool) -> ColumnElement[bool]:
    var = ExecutionVariable
    lowered = func.lower(var.text_value)
    comparison = lowered == func.lower(value) if equal else lowered != func.lower(value)
    return and_(var.type == VariableType.STRING.value, comparison)


def _variable_exists(
    owner: InstrumentedAttribute[str], name: str | None, condition: ColumnElement[bool]
) -> ColumnElement[bool]:
    var = ExecutionVariable
    clauses = [var.execution_id == owner, condition]
    if name is not None:
        clauses.append(var.name == name)
    return select(var.id).where(*clauses).exists()


def _subscription_exists(
    event_type: EventSubscriptionType, event_name: str
) -> ColumnElement[bool]:
    sub = ExecutionEventSubscription
    return (
        select(sub.id)
        .where(
            sub.execution_id == Execution.id,
            sub.event_type == event_type.value,
            sub.event_name == event_name,
        )
        .exists()
    )


class SqlAlchemyExecutionQuery:
    """Execution query builder over an AsyncSession.

    Build with the constraint methods (chainable), then run count(),
    list_page() or single_result(). One instance serves one request.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self._criteria: list[ColumnElement[bool]] = []
        self._order: list[ColumnElement[Any]] = []

    def _where(self, clause: ColumnElement[bool]) -> Self:
        self._criteria.append(clause)
        return self

    # Scalar fields

    def execution_id(self, execution_id: str) -> Self:
        return self._where(Execution.id == execution_id)

    def process_instance_id(self, process_instance_id: str) -> Self:
        return self._where(Execution.process_instance_id == process_instance_id)

    def process_definition_key(self, key: str) -> Self:
        return self._where(Execution.process_definition_key == key)

    def process_definition_id(self, definition_id: str) -> Self:
        return self._where(Execution.process_definition_id == definition_id)

    def process_instance_business_key(self, business_key: str) -> Self:
        # Business key lives on the process instance execution.
        instance = aliased(Execution)
        keyed = select(instance.id).where(instance.business_key == business_key)
        return self._where(Execution.process_instance_id.in_(keyed))

    def activity_id(self, activity_id: str) -> Self:
        return self._where(Execution.activity_id == activity_id)

    def parent_id(self, parent_id: str) -> Self:
        return self._where(Execution.parent_id == parent_id)

    def message_event_subscription_name(self, name: str) -> Self:
        return self._where(_subscription_exists(EventSubscriptionType.MESSAGE, name))

    def signal_event_subscription_name(self, name: str) -> Self:
        return self._where(_subscription_exists(EventSubscriptionType.SIGNAL, name))

    # Execution-local variables

    def variable_value_equals(self, name: str | None, value: Any) -> Self:
        return self._where(_variable_exists(Execution.id, name, _value_matches(value)))

    def variable_value_equals_ignore_case(self, name: str, value: str) -> Self:
        return self._where(
            _variable_exists(Execution.id, name, _ignore_case_matches(value, equal=True))
        )

    def variable_value_not_equals(self, name: str, value: Any) -> Self:
        return self._where(
            _variable_exists(Execution.id, name, _value_matches(value, equal=False))
        )

    def variable_value_not_equals_ignore_case(self, name: str, value: str) -> Self:
        return self._where(
            _variable_exists(Execution.id, name, _ignore_case_matches(value, equal=False))
        )

    # Process-instance variables

    def process_variable_value_equals(self, name: str | None, value: Any) -> Self:
        return self._where(
            _variable_exists(Execution.process_instance_id, name, _value_matches(value))
        )

    def process_variable_value_equals_ignore_case(self, name: str, value: str) -> Self:
        return self._where(
            _variable_exists(
                Execution.process_instance_id,
                name,
                _ignore_case_matches(value, equal=True),
            )
        )

    def process_variable_value_not_equals(self, name: str, value: Any) -> Self:
        return self._where(
            _variable_exists(
                Execution.process_instance_id, name, _value_matches(value, equal=False)
            )
        )

    def process_variable_value_not_equals_ignore_case(
        self, name: str, value: str
    ) -> Self:
        return self._where(
            _variable_exists(
                Execution.process_instance_id,
                name,
                _ignore_case_matches(value, equal=False),
            )
        )

    # Ordering and execution

    def order_by(self, prop: ExecutionQueryProperty, direction: SortDirection) -> Self:
        column = _ORDER_COLUMNS[prop]
        self._order.append(column.desc() if direction is SortDirection.DESC else column.asc())
        return self

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Execution).where(*self._criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def list_page(self, offset: int, limit: int) -> list[ExecutionView]:
        # id as final key keeps pages stable when sort values tie
        stmt = (
            select(Execution)
            .where(*self._criteria)
            .order_by(*self._order, Execution.id.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [to_execution_view(row) for row in result.scalars().all()]

    async def single_result(self) -> ExecutionView | None:
        result = await self.db.execute(select(Execution).where(*self._criteria))
        row = result.scalar_one_or_none()
        return to_execution_view(row) if row is not None else None
