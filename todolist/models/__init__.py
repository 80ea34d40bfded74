"""ORM Models — SQLAlchemy declarative models for persisted todo list state.

Invariants:
    - All models inherit from Base (db/base.py)
    - TodoItemModel owns ProgressionModel rows (cascade delete)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from todolist.models.todo_item import TodoItemModel  # noqa: F401
from todolist.models.progression import ProgressionModel  # noqa: F401
