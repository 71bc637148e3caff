"""Application interfaces (ports): query and repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.queries import (
    ExecutionQuery,
    ExecutionQueryFactory,
    IVariableValueResolver,
)
from app.application.interfaces.repositories import IExecutionRepository

__all__ = [
    "ExecutionQuery",
    "ExecutionQueryFactory",
    "IExecutionRepository",
    "IVariableValueResolver",
]
