"""TodoItem ORM — persisted row for one item of the todo list.

Invariants:
    - id is the domain ItemId (integer, allocated by the repository, not autoincrement)
    - progressions cascade-delete with their item
    - progressions load ordered by date (the domain's chronological order)
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todolist.db.base import Base


class TodoItemModel(Base):
    """Todo item row — owns its progression rows."""
    __tablename__ = "todo_items"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    progressions: Mapped[list["ProgressionModel"]] = relationship(
        "ProgressionModel", back_populates="item",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="ProgressionModel.date",
    )
