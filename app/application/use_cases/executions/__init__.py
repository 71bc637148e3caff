"""Execution query use cases."""

from app.application.use_cases.executions.execution_operations import (
    ExecutionQueryService,
    build_sort_request,
)
from app.application.use_cases.executions.filter_compiler import (
    ExecutionVariableScope,
    FilterCompiler,
    ProcessInstanceVariableScope,
    VariableConstraint,
    VariableScope,
)
from app.application.use_cases.executions.page_assembler import (
    EXECUTION_SORT_PROPERTIES,
    PageAssembler,
)

__all__ = [
    "EXECUTION_SORT_PROPERTIES",
    "ExecutionQueryService",
    "ExecutionVariableScope",
    "FilterCompiler",
    "PageAssembler",
    "ProcessInstanceVariableScope",
    "VariableConstraint",
    "VariableScope",
    "build_sort_request",
]
