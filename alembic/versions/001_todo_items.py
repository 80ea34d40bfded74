"""Todo items and progressions.

Revision ID: 001_todo_items
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_todo_items"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "todo_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "progressions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "todo_item_id", sa.Integer,
            sa.ForeignKey("todo_items.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("percent", sa.Numeric(5, 2), nullable=False),
    )
    op.create_index("ix_progressions_todo_item_id", "progressions", ["todo_item_id"])


def downgrade() -> None:
    op.drop_index("ix_progressions_todo_item_id", table_name="progressions")
    op.drop_table("progressions")
    op.drop_table("todo_items")
