"""Root conftest — shared test configuration and aggregate fixtures."""

import os

import pytest

# Ensure tests never touch a real database file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORAGE_BACKEND", "database")
os.environ.setdefault("LOG_FORMAT", "text")

from todolist.core.todo_list import TodoList  # noqa: E402
from todolist.infrastructure.category_validator import StaticCategoryValidator  # noqa: E402


@pytest.fixture
def category_validator() -> StaticCategoryValidator:
    return StaticCategoryValidator(["Work", "Personal", "Education"])


@pytest.fixture
def todo_list(category_validator) -> TodoList:
    return TodoList(category_validator)
