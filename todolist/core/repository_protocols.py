"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - CategoryValidator is synchronous: the aggregate consults it inside add_item,
      which never suspends
    - TodoListRepository is async because implementations do IO, but the aggregate
      never calls it — the shell orchestrates load → mutate → save around the core
"""

from typing import Protocol, TYPE_CHECKING

from todolist.core.domain_types import ItemId

if TYPE_CHECKING:
    from todolist.core.todo_item import TodoItem
    from todolist.core.todo_list import TodoList


class CategoryValidator(Protocol):
    """Supplies the admissible category set — consulted only by TodoList.add_item."""
    def is_valid_category(self, category: str) -> bool: ...
    def get_valid_categories(self) -> frozenset[str]: ...


class TodoListRepository(Protocol):
    """Contract for todo list persistence — implemented by shell."""
    async def load(self, todo_list: "TodoList") -> "TodoList": ...
    async def save_item(self, item: "TodoItem") -> None: ...
    async def delete_item(self, item_id: ItemId) -> None: ...
    async def next_id(self) -> ItemId: ...
