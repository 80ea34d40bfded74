"""Request Dependencies — wires repository, category validator and write lock into the service.

Invariants:
    - storage_backend "memory" shares ONE InMemoryTodoListRepository per process
    - storage_backend "database" opens one session per request via db_manager
    - One asyncio.Lock per app (app.state.write_lock) serializes all writes

Design Decisions:
    - db_manager read through the module at call time so tests can swap it
    - Category validator cached per category tuple: settings are immutable per process
"""

import asyncio
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Depends, Request

import todolist.infrastructure.database as database
from todolist.config import get_settings
from todolist.core.repository_protocols import TodoListRepository
from todolist.infrastructure.category_validator import StaticCategoryValidator
from todolist.services.todo_list_repository import (
    InMemoryTodoListRepository, SqlAlchemyTodoListRepository,
)
from todolist.services.todo_list_service import TodoListService

# Process-wide in-memory store (storage_backend="memory"; single worker only)
_memory_repository = InMemoryTodoListRepository()


@lru_cache
def _category_validator(categories: tuple[str, ...]) -> StaticCategoryValidator:
    return StaticCategoryValidator(categories)


def get_category_validator() -> StaticCategoryValidator:
    return _category_validator(tuple(get_settings().valid_categories))


def get_write_lock(request: Request) -> asyncio.Lock:
    lock = getattr(request.app.state, "write_lock", None)
    if lock is None:
        lock = asyncio.Lock()
        request.app.state.write_lock = lock
    return lock


async def get_repository() -> AsyncGenerator[TodoListRepository, None]:
    if get_settings().storage_backend == "memory":
        yield _memory_repository
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as session:
        yield SqlAlchemyTodoListRepository(session)


def get_todo_list_service(
    repository: TodoListRepository = Depends(get_repository),
    category_validator: StaticCategoryValidator = Depends(get_category_validator),
    write_lock: asyncio.Lock = Depends(get_write_lock),
) -> TodoListService:
    return TodoListService(repository, category_validator, write_lock)
