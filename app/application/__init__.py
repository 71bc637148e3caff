"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (query builder, repositories).
"""

from app.application.interfaces import (
    ExecutionQuery,
    IExecutionRepository,
    IVariableValueResolver,
)
from app.application.services import VariableValueResolver
from app.application.use_cases import (
    ExecutionQueryService,
    FilterCompiler,
    PageAssembler,
)

__all__ = [
    "ExecutionQuery",
    "ExecutionQueryService",
    "FilterCompiler",
    "IExecutionRepository",
    "IVariableValueResolver",
    "PageAssembler",
    "VariableValueResolver",
]
