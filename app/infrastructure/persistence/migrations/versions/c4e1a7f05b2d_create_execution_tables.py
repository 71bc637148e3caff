"""create_execution_tables

Revision ID: c4e1a7f05b2d
Revises:
Create Date: 2026-10-19 09:12:41.208113

Initial schema: execution, execution_event_subscription, execution_variable.
Variable values are stored per type in text_value / long_value / double_value
(booleans as 0/1, dates as epoch milliseconds).
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c4e1a7f05b2d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "execution",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("parent_id", sa.String(), nullable=True),
        sa.Column("process_instance_id", sa.String(), nullable=False),
        sa.Column("process_definition_id", sa.String(), nullable=False),
        sa.Column("process_definition_key", sa.String(), nullable=False),
        sa.Column("business_key", sa.String(), nullable=True),
        sa.Column("activity_id", sa.String(), nullable=True),
        sa.Column(
            "suspended", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["execution.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_execution_parent_id", "execution", ["parent_id"])
    op.create_index(
        "ix_execution_process_instance_id", "execution", ["process_instance_id"]
    )
    op.create_index(
        "ix_execution_process_definition_id", "execution", ["process_definition_id"]
    )
    op.create_index(
        "ix_execution_process_definition_key", "execution", ["process_definition_key"]
    )
    op.create_index("ix_execution_business_key", "execution", ["business_key"])

    op.create_table(
        "execution_event_subscription",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("execution_id", sa.String(), nullable=False),
        sa.Column("event_type", sa.String(), nullable=False),
        sa.Column("event_name", sa.String(), nullable=False),
        sa.CheckConstraint(
            "event_type IN ('message', 'signal')",
            name="execution_event_subscription_type_check",
        ),
        sa.ForeignKeyConstraint(
            ["execution_id"], ["execution.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_execution_event_subscription_execution_id",
        "execution_event_subscription",
        ["execution_id"],
    )
    op.create_index(
        "ix_execution_event_subscription_type_name",
        "execution_event_subscription",
        ["event_type", "event_name"],
    )

    op.create_table(
        "execution_variable",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("execution_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("text_value", sa.Text(), nullable=True),
        sa.Column("long_value", sa.BigInteger(), nullable=True),
        sa.Column("double_value", sa.Float(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint(
            "type IN ('string', 'short', 'integer', 'long', 'double', 'boolean', 'date')",
            name="execution_variable_type_check",
        ),
        sa.ForeignKeyConstraint(
            ["execution_id"], ["execution.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("execution_id", "name", name="uq_execution_variable_name"),
    )
    op.create_index(
        "ix_execution_variable_execution_id", "execution_variable", ["execution_id"]
    )
    op.create_index("ix_execution_variable_name", "execution_variable", ["name"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_execution_variable_name", table_name="execution_variable")
    op.drop_index("ix_execution_variable_execution_id", table_name="execution_variable")
    op.drop_table("execution_variable")

    op.drop_index(
        "ix_execution_event_subscription_type_name",
        table_name="execution_event_subscription",
    )
    op.drop_index(
        "ix_execution_event_subscription_execution_id",
        table_name="execution_event_subscription",
    )
    op.drop_table("execution_event_subscription")

    op.drop_index("ix_execution_business_key", table_name="execution")
    op.drop_index("ix_execution_process_definition_key", table_name="execution")
    op.drop_index("ix_execution_process_definition_id", table_name="execution")
    op.drop_index("ix_execution_process_instance_id", table_name="execution")
    op.drop_index("ix_execution_parent_id", table_name="execution")
    op.drop_table("execution")
