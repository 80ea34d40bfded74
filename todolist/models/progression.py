"""Progression ORM — one dated percent entry of a todo item.

Invariants:
    - todo_item_id FK cascades on delete
    - percent stored as Numeric(5, 2): two decimals, max 100.00
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todolist.db.base import Base


class ProgressionModel(Base):
    __tablename__ = "progressions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    todo_item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("todo_items.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    percent: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)

    item: Mapped["TodoItemModel"] = relationship(
        "TodoItemModel", back_populates="progressions",
    )
