"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application use cases.
All use cases are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.variable_value_resolver import VariableValueResolver
from app.application.use_cases.executions import (
    EXECUTION_SORT_PROPERTIES,
    ExecutionQueryService,
    FilterCompiler,
    PageAssembler,
)
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.queries import SqlAlchemyExecutionQuery
from app.infrastructure.persistence.repositories import ExecutionRepository


def _build_execution_service(db: AsyncSession) -> ExecutionQueryService:
    resolver = VariableValueResolver()
    return ExecutionQueryService(
        compiler=FilterCompiler(
            query_factory=lambda: SqlAlchemyExecutionQuery(db),
            resolver=resolver,
        ),
        assembler=PageAssembler(EXECUTION_SORT_PROPERTIES),
        resolver=resolver,
        execution_repo=ExecutionRepository(db),
    )


async def get_execution_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ExecutionQueryService:
    """Execution query service for read operations (list, query, get by id)."""
    return _build_execution_service(db)


async def get_execution_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ExecutionQueryService:
    """Execution query service for variable updates (transactional)."""
    return _build_execution_service(db)
