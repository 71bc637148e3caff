"""Application use cases: one entry point per workflow."""

from app.application.use_cases.executions import (
    ExecutionQueryService,
    FilterCompiler,
    PageAssembler,
)

__all__ = [
    "ExecutionQueryService",
    "FilterCompiler",
    "PageAssembler",
]
