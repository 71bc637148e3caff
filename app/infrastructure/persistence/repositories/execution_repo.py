"""Execution repository: executions, event subscriptions and variables (writes)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.execution import ExecutionView, VariableToSet, VariableView
from app.domain.enums import EventSubscriptionType
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.infrastructure.persistence.models.execution import (
    Execution,
    ExecutionEventSubscription,
    ExecutionVariable,
)
from app.infrastructure.persistence.queries.execution_query import to_execution_view
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def _to_variable_view(row: ExecutionVariable) -> VariableView:
    return VariableView(
        execution_id=row.execution_id,
        name=row.name,
        type=row.type,
        value=row.value,
    )


class ExecutionRepository(BaseRepository[Execution]):
    """Execution repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Execution)

    async def _on_after_create(self, obj: Execution) -> None:
        logger.debug(
            "Created execution %s (process instance %s)", obj.id, obj.process_instance_id
        )

    async def create_execution(
        self,
        process_definition_id: str,
        process_definition_key: str,
        process_instance_id: str | None = None,
        parent_id: str | None = None,
        business_key: str | None = None,
        activity_id: str | None = None,
        execution_id: str | None = None,
    ) -> ExecutionView:
        """Create an execution; without process_instance_id it is its own process instance."""
        new_id = execution_id or generate_cuid()
        execution = Execution(
            id=new_id,
            process_instance_id=process_instance_id or new_id,
            parent_id=parent_id,
            process_definition_id=process_definition_id,
            process_definition_key=process_definition_key,
            business_key=business_key,
            activity_id=activity_id,
            suspended=False,
        )
        return to_execution_view(await self.create(execution))

    async def add_event_subscription(
        self, execution_id: str, event_type: str, event_name: str
    ) -> None:
        """Subscribe execution to a message or signal event.

        Raises:
            ValidationException: If event_type is not message or signal.
            ResourceNotFoundException: If the execution does not exist.
        """
        if event_type not in EventSubscriptionType.values():
            raise ValidationException(
                f"event_type must be one of {EventSubscriptionType.values()}",
                field="event_type",
            )
        if not await self.exists(execution_id):
            raise ResourceNotFoundException("execution", execution_id)
        self.db.add(
            ExecutionEventSubscription(
                execution_id=execution_id, event_type=event_type, event_name=event_name
            )
        )
        await self.db.flush()

    async def get_variables(self, execution_id: str) -> list[VariableView]:
        """Return variables of an execution ordered by name."""
        result = await self.db.execute(
            select(ExecutionVariable)
            .where(ExecutionVariable.execution_id == execution_id)
            .order_by(ExecutionVariable.name.asc())
        )
        return [_to_variable_view(v) for v in result.scalars().all()]

    async def set_variables(
        self, execution_id: str, variables: Sequence[VariableToSet]
    ) -> list[VariableView]:
        """Insert or replace variables by name; return all variables of the execution."""
        names = [v.name for v in variables]
        result = await self.db.execute(
            select(ExecutionVariable).where(
                ExecutionVariable.execution_id == execution_id,
                ExecutionVariable.name.in_(names),
            )
        )
        existing = {row.name: row for row in result.scalars().all()}
        for var in variables:
            row = existing.get(var.name)
            if row is None:
                row = ExecutionVariable(execution_id=execution_id, name=var.name)
                self.db.add(row)
                existing[var.name] = row
            row.assign(var.type, var.value)
        await self.db.flush()
        return await self.get_variables(execution_id)
