"""Execution, event subscription and variable ORM models."""

from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Float,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import EventSubscriptionType, VariableType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ExecutionOwnedMixin,
    TimestampMixin,
)
from app.shared.utils.datetime import from_timestamp_ms_utc, to_timestamp_ms

_INTEGER_TYPES = (VariableType.SHORT, VariableType.INTEGER, VariableType.LONG)


def _in_check(column: str, values: list[str]) -> str:
    return "{} IN ({})".format(
        column, ", ".join("'{}'".format(v.replace("'", "''")) for v in values)
    )


class Execution(CuidMixin, TimestampMixin, Base):
    """Workflow execution. Table: execution.

    An execution whose id equals its process_instance_id is the process
    instance itself; child executions point to it and to their parent.
    """

    __tablename__ = "execution"

    parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("execution.id", ondelete="CASCADE"), nullable=True, index=True
    )
    process_instance_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    process_definition_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    process_definition_key: Mapped[str] = mapped_column(String, nullable=False, index=True)
    business_key: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    activity_id: Mapped[str | None] = mapped_column(String, nullable=True)
    suspended: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=sa.false()
    )


class ExecutionEventSubscription(CuidMixin, ExecutionOwnedMixin, Base):
    """Message or signal subscription of an execution. Table: execution_event_subscription."""

    __tablename__ = "execution_event_subscription"

    event_type: Mapped[str] = mapped_column(String, nullable=False)
    event_name: Mapped[str] = mapped_column(String, nullable=False)

    __table_args__ = (
        Index("ix_execution_event_subscription_type_name", "event_type", "event_name"),
        CheckConstraint(
            _in_check("event_type", EventSubscriptionType.values()),
            name="execution_event_subscription_type_check",
        ),
    )


class ExecutionVariable(CuidMixin, ExecutionOwnedMixin, TimestampMixin, Base):
    """Runtime variable of an execution. Table: execution_variable.

    Value columns by type: string -> text_value; short/integer/long and
    boolean (0/1) and date (epoch ms) -> long_value; double -> double_value.
    """

    __tablename__ = "execution_variable"

    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False)
    text_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    long_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    double_value: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        UniqueConstraint("execution_id", "name", name="uq_execution_variable_name"),
        Index("ix_execution_variable_name", "name"),
        CheckConstraint(
            _in_check("type", VariableType.values()),
            name="execution_variable_type_check",
        ),
    )

    def assign(self, type_name: str, value: Any) -> None:
        """Store value in the column for type_name, clearing the others."""
        var_type = VariableType(type_name)
        self.type = var_type.value
        self.text_value = None
        self.long_value = None
        self.double_value = None
        if var_type is VariableType.STRING:
            self.text_value = str(value)
        elif var_type in _INTEGER_TYPES:
            self.long_value = int(value)
        elif var_type is VariableType.DOUBLE:
            self.double_value = float(value)
        elif var_type is VariableType.BOOLEAN:
            self.long_value = 1 if value else 0
        else:
            self.long_value = to_timestamp_ms(value)

    @property
    def value(self) -> str | int | float | bool | datetime | None:
        """Typed value decoded from the storage columns."""
        var_type = VariableType(self.type)
        if var_type is VariableType.STRING:
            return self.text_value
        if var_type is VariableType.DOUBLE:
            return self.double_value
        if self.long_value is None:
            return None
        if var_type is VariableType.BOOLEAN:
            return self.long_value == 1
        if var_type is VariableType.DATE:
            return from_timestamp_ms_utc(self.long_value)
        return self.long_value
