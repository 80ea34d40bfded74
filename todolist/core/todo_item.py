"""TodoItem — entity with an append-only, chronologically ordered progression log.

Invariants:
    - id assigned once at construction, never changes
    - title, description and category are read-only properties; description
      changes only through _replace_description (called by the aggregate)
    - progressions exposed as a tuple; insertion order = chronological order
    - Mutators are private and structural only: the TodoList aggregate is their
      sole caller and owns every business rule
"""

from datetime import datetime
from decimal import Decimal

from todolist.core.domain_types import ItemId, MAX_TOTAL_PROGRESS
from todolist.core.progression import Progression


class TodoItem:
    """A task item accumulating dated progress entries."""

    def __init__(
        self, item_id: ItemId, title: str, description: str, category: str,
    ):
        self._id = item_id
        self._title = title
        self._description = description
        self._category = category
        self._progressions: list[Progression] = []

    @property
    def id(self) -> ItemId:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def category(self) -> str:
        return self._category

    @property
    def progressions(self) -> tuple[Progression, ...]:
        return tuple(self._progressions)

    # --- Mutators (TodoList only) ----------------------------------------------

    def _append_progression(self, date: datetime, percent: Decimal) -> Progression:
        """Append a progression. No validation beyond the value type's own."""
        progression = Progression(date, percent)
        self._progressions.append(progression)
        return progression

    def _replace_description(self, description: str) -> None:
        self._description = description

    # --- Derived reads ----------------------------------------------------------

    @property
    def total_progress(self) -> Decimal:
        return sum((p.percent for p in self._progressions), Decimal("0"))

    @property
    def last_progression_date(self) -> datetime | None:
        if not self._progressions:
            return None
        return max(p.date for p in self._progressions)

    @property
    def is_completed(self) -> bool:
        return self.total_progress >= MAX_TOTAL_PROGRESS

    def __repr__(self) -> str:
        return (
            f"TodoItem(id={self._id!r}, title={self._title!r}, "
            f"category={self._category!r}, total_progress={self.total_progress})"
        )
