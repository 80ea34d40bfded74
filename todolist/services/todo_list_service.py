"""Todo List Service — imperative shell: load aggregate, apply command, persist, log.

Invariants:
    - Every command runs load → aggregate call → persist inside one write lock
    - Nothing is persisted when the aggregate returns a failure
    - Returns the aggregate's Result unchanged in kind; never raises for business failures
    - Every domain event is logged at INFO, every rule failure at WARNING

Design Decisions:
    - asyncio.Lock supplied by the caller (one per app): the aggregate is single-writer
      and holds no lock itself. Multi-process deployments need storage-level locking
      on top (not provided)
    - A fresh TodoList per command, rebuilt from the repository: no aggregate state
      survives between requests
"""

import asyncio
import logging
from datetime import datetime
from decimal import Decimal

from todolist.core.domain_types import FailureKind, ItemId
from todolist.core.repository_protocols import CategoryValidator, TodoListRepository
from todolist.core.result import Result
from todolist.core.todo_item import TodoItem
from todolist.core.todo_list import TodoList

logger = logging.getLogger(__name__)


class TodoListService:
    """Runs TodoList commands against a repository."""

    def __init__(
        self,
        repository: TodoListRepository,
        category_validator: CategoryValidator,
        write_lock: asyncio.Lock,
    ):
        self._repository = repository
        self._category_validator = category_validator
        self._lock = write_lock

    async def _load(self) -> TodoList:
        return await self._repository.load(TodoList(self._category_validator))

    # --- Commands -----------------------------------------------------------------

    async def add_item(
        self, title: str, description: str, category: str,
    ) -> Result[TodoItem]:
        async with self._lock:
            todo_list = await self._load()
            item_id = await self._repository.next_id()
            result = todo_list.add_item(item_id, title, description, category)
            if result.is_success:
                await self._repository.save_item(result.value)
            self._log_outcome("add_item", todo_list, result)
            return result

    async def update_item(self, item_id: ItemId, description: str) -> Result[TodoItem]:
        async with self._lock:
            todo_list = await self._load()
            result = todo_list.update_item(item_id, description)
            if result.is_success:
                await self._repository.save_item(result.value)
            self._log_outcome("update_item", todo_list, result)
            return result

    async def remove_item(self, item_id: ItemId) -> Result[TodoItem]:
        async with self._lock:
            todo_list = await self._load()
            result = todo_list.remove_item(item_id)
            if result.is_success:
                await self._repository.delete_item(item_id)
            self._log_outcome("remove_item", todo_list, result)
            return result

    async def register_progression(
        self, item_id: ItemId, date: datetime, percent: Decimal,
    ) -> Result[TodoItem]:
        async with self._lock:
            todo_list = await self._load()
            result = todo_list.register_progression(item_id, date, percent)
            self._log_outcome("register_progression", todo_list, result)
            if result.is_failure:
                return result
            item = todo_list.find_item(item_id)
            await self._repository.save_item(item)
            return Result.success(item)

    # --- Queries ------------------------------------------------------------------

    async def get_all_items(self) -> tuple[TodoItem, ...]:
        todo_list = await self._load()
        return todo_list.get_all_items()

    async def get_item(self, item_id: ItemId) -> Result[TodoItem]:
        todo_list = await self._load()
        item = todo_list.find_item(item_id)
        if item is None:
            return Result.failure(
                f"TodoItem with Id {item_id} was not found.",
                FailureKind.ITEM_NOT_FOUND,
                item_id=item_id,
            )
        return Result.success(item)

    def get_valid_categories(self) -> list[str]:
        return sorted(self._category_validator.get_valid_categories())

    # --- Logging ------------------------------------------------------------------

    def _log_outcome(self, operation: str, todo_list: TodoList, result: Result) -> None:
        if result.is_failure:
            logger.warning(
                f"{operation} rejected: {result.error}",
                extra={
                    "error_code": result.kind.value if result.kind else None,
                    "item_id": result.details.get("item_id"),
                    "rule": result.details.get("rule"),
                },
            )
            return
        for event in todo_list.pull_events():
            logger.info(
                f"{operation}: {event.event_type}",
                extra={"event_type": event.event_type, "item_id": event.item_id},
            )
