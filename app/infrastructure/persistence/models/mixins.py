"""SQLAlchemy mixins shared by the execution tables.

CuidMixin: CUID2 primary key. TimestampMixin: created_at / updated_at.
ExecutionOwnedMixin: execution_id foreign key for rows that belong to one
execution (event subscriptions, variables) and go away with it.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """CUID primary key (id, default generate_cuid)."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class ExecutionOwnedMixin:
    """execution_id -> execution.id, indexed, deleted with the execution."""

    @declared_attr
    def execution_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("execution.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
