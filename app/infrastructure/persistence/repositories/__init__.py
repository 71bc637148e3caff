"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.execution_repo import (
    ExecutionRepository,
)

__all__ = [
    "BaseRepository",
    "ExecutionRepository",
]
