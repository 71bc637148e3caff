"""Execution query use cases: filtered listing, single lookup, variable updates."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from app.application.dtos.execution import (
    ExecutionView,
    FilterRequest,
    Page,
    SortRequest,
    VariableCriterion,
    VariableToSet,
    VariableView,
)
from app.application.use_cases.executions.filter_compiler import FilterCompiler
from app.application.use_cases.executions.page_assembler import PageAssembler
from app.domain.enums import SortDirection, VariableType
from app.domain.exceptions import (
    InvalidFilterException,
    InvalidSortException,
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from app.application.interfaces.queries import IVariableValueResolver
    from app.application.interfaces.repositories import IExecutionRepository

logger = logging.getLogger(__name__)


def build_sort_request(
    sort: str | None,
    order: str | None,
    start: int,
    size: int,
    default_sort: str,
) -> SortRequest:
    """Build a SortRequest from wire pagination params.

    Field whitelisting happens in PageAssembler; here only order is checked.
    """
    raw_order = (order or SortDirection.ASC.value).lower()
    try:
        direction = SortDirection(raw_order)
    except ValueError:
        raise InvalidSortException(
            f"Value for param 'order' is not valid: '{order}', must be 'asc' or 'desc'",
            allowed=SortDirection.values(),
        ) from None
    if start < 0:
        raise ValidationException("start must be >= 0", field="start")
    if size < 1:
        raise ValidationException("size must be >= 1", field="size")
    return SortRequest(
        field=sort or default_sort,
        direction=direction,
        offset=start,
        limit=size,
    )


def infer_variable_type(value: object) -> VariableType:
    """Declared type for an untyped, already resolved value."""
    if isinstance(value, bool):
        return VariableType.BOOLEAN
    if isinstance(value, int):
        return VariableType.INTEGER if -(2**31) <= value < 2**31 else VariableType.LONG
    if isinstance(value, float):
        return VariableType.DOUBLE
    if isinstance(value, str):
        return VariableType.STRING
    return VariableType.DATE


class ExecutionQueryService:
    """Query executions (compile + assemble), look one up, set its variables."""

    def __init__(
        self,
        compiler: FilterCompiler,
        assembler: PageAssembler,
        resolver: IVariableValueResolver,
        execution_repo: IExecutionRepository,
    ) -> None:
        self.compiler = compiler
        self.assembler = assembler
        self.resolver = resolver
        self.execution_repo = execution_repo

    async def query_executions(
        self, request: FilterRequest, sort: SortRequest
    ) -> Page[ExecutionView]:
        """Return a page of executions matching request, ordered per sort."""
        try:
            # Reject bad sort fields before compiling anything.
            self.assembler.resolve_sort_property(sort.field)
            query = self.compiler.compile(request)
        except (InvalidFilterException, InvalidSortException) as e:
            logger.info("Rejected execution query: %s", e.message)
            raise
        return await self.assembler.assemble(query, sort)

    async def get_execution(self, execution_id: str | None) -> ExecutionView:
        """Return the execution with this id.

        Raises:
            InvalidFilterException: If execution_id is missing or blank.
            ResourceNotFoundException: If no execution has this id.
        """
        if not execution_id or not execution_id.strip():
            raise InvalidFilterException("The executionId cannot be null")
        query = self.compiler.compile(FilterRequest(id=execution_id))
        execution = await query.single_result()
        if execution is None:
            raise ResourceNotFoundException("execution", execution_id)
        return execution

    async def set_variables(
        self, execution_id: str, variables: Sequence[VariableCriterion]
    ) -> list[VariableView]:
        """Resolve and store variables on an execution (upsert by name).

        Only name, type and value of each item are used.

        Raises:
            ValidationException: If a variable has no name.
            InvalidFilterException: If a value cannot be resolved.
            ResourceNotFoundException: If the execution does not exist.
        """
        to_set: list[VariableToSet] = []
        for var in variables:
            if not var.name:
                raise ValidationException("Variable name is required", field="name")
            value = self.resolver.resolve(var.value, var.type)
            if value is None:
                raise InvalidFilterException(
                    f"Variable value is missing for variable: {var.name}", var.name
                )
            declared = VariableType(var.type) if var.type else infer_variable_type(value)
            to_set.append(VariableToSet(name=var.name, type=declared.value, value=value))

        await self.get_execution(execution_id)
        return await self.execution_repo.set_variables(execution_id, to_set)
