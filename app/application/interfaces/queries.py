"""Query interfaces (ports) for the application layer.

ExecutionQuery is the strongly-typed query builder FilterCompiler drives and
PageAssembler executes. Infrastructure provides the SQL implementation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

from app.domain.enums import ExecutionQueryProperty, SortDirection

if TYPE_CHECKING:
    from app.application.dtos.execution import ExecutionView


class ExecutionQuery(Protocol):
    """Protocol for the execution query builder. Constraint methods chain."""

    def execution_id(self, execution_id: str) -> ExecutionQuery: ...

    def process_instance_id(self, process_instance_id: str) -> ExecutionQuery: ...

    def process_definition_key(self, key: str) -> ExecutionQuery: ...

    def process_definition_id(self, definition_id: str) -> ExecutionQuery: ...

    def process_instance_business_key(self, business_key: str) -> ExecutionQuery: ...

    def activity_id(self, activity_id: str) -> ExecutionQuery: ...

    def parent_id(self, parent_id: str) -> ExecutionQuery: ...

    def message_event_subscription_name(self, name: str) -> ExecutionQuery: ...

    def signal_event_subscription_name(self, name: str) -> ExecutionQuery: ...

    # Execution-local variables
    def variable_value_equals(self, name: str | None, value: Any) -> ExecutionQuery:
        """Match a variable by name and value; name None matches any variable."""

    def variable_value_equals_ignore_case(self, name: str, value: str) -> ExecutionQuery: ...

    def variable_value_not_equals(self, name: str, value: Any) -> ExecutionQuery: ...

    def variable_value_not_equals_ignore_case(
        self, name: str, value: str
    ) -> ExecutionQuery: ...

    # Variables of the owning process instance
    def process_variable_value_equals(
        self, name: str | None, value: Any
    ) -> ExecutionQuery:
        """Match a process-instance variable; name None matches any variable."""

    def process_variable_value_equals_ignore_case(
        self, name: str, value: str
    ) -> ExecutionQuery: ...

    def process_variable_value_not_equals(self, name: str, value: Any) -> ExecutionQuery: ...

    def process_variable_value_not_equals_ignore_case(
        self, name: str, value: str
    ) -> ExecutionQuery: ...

    def order_by(
        self, prop: ExecutionQueryProperty, direction: SortDirection
    ) -> ExecutionQuery: ...

    async def count(self) -> int:
        """Return the number of matches ignoring order and bounds."""

    async def list_page(self, offset: int, limit: int) -> list[ExecutionView]:
        """Return ordered matches within [offset, offset + limit)."""

    async def single_result(self) -> ExecutionView | None:
        """Return the only match, or None."""


ExecutionQueryFactory = Callable[[], ExecutionQuery]


class IVariableValueResolver(Protocol):
    """Protocol for converting wire values into engine-native typed values."""

    def resolve(self, value: Any, type_name: str | None = None) -> Any:
        """Return the typed value; raise InvalidFilterException when not convertible."""
