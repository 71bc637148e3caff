"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.execution import (
        ExecutionView,
        VariableToSet,
        VariableView,
    )


# Execution repository interface
class IExecutionRepository(Protocol):
    """Protocol for execution persistence (writes; reads go through ExecutionQuery)."""

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

    async def add_event_subscription(
        self, execution_id: str, event_type: str, event_name: str
    ) -> None:
        """Subscribe execution to a message or signal event."""

    async def set_variables(
        self, execution_id: str, variables: Sequence[VariableToSet]
    ) -> list[VariableView]:
        """Insert or replace variables by name; return all variables of the execution."""
