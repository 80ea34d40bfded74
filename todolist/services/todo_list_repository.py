"""Todo List Repositories — SQLAlchemy and in-memory persistence of aggregate state.

Invariants:
    - load() rebuilds items through TodoList.restore_item: stored progressions are
      re-checked by the same rules as live commands
    - save_item() replaces an item's stored progressions with the domain's (upsert)
    - Datetimes leave the repository timezone-aware (UTC)
    - next_id() never returns an id already stored

Design Decisions:
    - Whole-list load per operation: the aggregate is the consistency boundary,
      partial loads would let rules run against incomplete state
    - In-memory repository keeps plain snapshots, never live TodoItem objects,
      so nothing outside the aggregate holds a mutable reference
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.core.domain_types import ItemId
from todolist.core.progression import as_utc
from todolist.core.todo_item import TodoItem
from todolist.core.todo_list import TodoList
from todolist.models.progression import ProgressionModel
from todolist.models.todo_item import TodoItemModel

logger = logging.getLogger(__name__)


class SqlAlchemyTodoListRepository:
    """TodoListRepository over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def load(self, todo_list: TodoList) -> TodoList:
        result = await self.db.execute(
            select(TodoItemModel).order_by(TodoItemModel.id),
        )
        for row in result.scalars().all():
            todo_list.restore_item(
                ItemId(row.id),
                row.title,
                row.description,
                row.category,
                [(as_utc(p.date), Decimal(p.percent)) for p in row.progressions],
            )
        return todo_list

    async def save_item(self, item: TodoItem) -> None:
        row = await self.db.get(TodoItemModel, item.id)
        if row is None:
            row = TodoItemModel(id=item.id)
            self.db.add(row)
        row.title = item.title
        row.description = item.description
        row.category = item.category
        row.progressions = [
            ProgressionModel(date=p.date, percent=p.percent)
            for p in item.progressions
        ]
        await self.db.commit()

    async def delete_item(self, item_id: ItemId) -> None:
        row = await self.db.get(TodoItemModel, item_id)
        if row is None:
            logger.warning(
                "Delete requested for unknown item", extra={"item_id": item_id},
            )
            return
        await self.db.delete(row)
        await self.db.commit()

    async def next_id(self) -> ItemId:
        result = await self.db.execute(select(func.max(TodoItemModel.id)))
        current = result.scalar_one_or_none()
        return ItemId((current or 0) + 1)


class InMemoryTodoListRepository:
    """TodoListRepository kept in process memory (state lost on restart)."""

    def __init__(self) -> None:
        self._rows: dict[ItemId, tuple[str, str, str, list[tuple[datetime, Decimal]]]] = {}
        self._current_id = 0

    async def load(self, todo_list: TodoList) -> TodoList:
        for item_id in sorted(self._rows):
            title, description, category, progressions = self._rows[item_id]
            todo_list.restore_item(
                item_id, title, description, category, list(progressions),
            )
        return todo_list

    async def save_item(self, item: TodoItem) -> None:
        self._rows[item.id] = (
            item.title,
            item.description,
            item.category,
            [(p.date, p.percent) for p in item.progressions],
        )

    async def delete_item(self, item_id: ItemId) -> None:
        self._rows.pop(item_id, None)

    async def next_id(self) -> ItemId:
        self._current_id = max(self._current_id, *self._rows, 0) + 1
        return ItemId(self._current_id)
