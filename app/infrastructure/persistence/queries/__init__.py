"""SQL query builders implementing application query ports."""

from app.infrastructure.persistence.queries.execution_query import (
    SqlAlchemyExecutionQuery,
    to_execution_view,
)

__all__ = ["SqlAlchemyExecutionQuery", "to_execution_view"]
