"""TodoList Aggregate — the single mutation gate over a keyed collection of TodoItems.

Invariants:
    - Every item's total progress stays <= 100 at every observable point
    - Progression dates are strictly increasing per item
    - total_progress > 50 locks an item: update_item and remove_item fail with CANNOT_MODIFY
    - get_all_items() is always ordered by ascending id
    - Business failures are returned as Result.failure — no exception crosses the
      public boundary for an expected outcome; a failed operation mutates nothing
    - add_item upserts: an existing item with the same id is replaced
    - Progression dates are stored timezone-aware; naive input is taken as UTC
    - Items handed out are read-only to callers: TodoItem exposes no public
      mutator, so every change passes the rules below

Design Decisions:
    - Rules injected as Specifications (defaults: can_modify_item, valid_progression)
      so the lockout threshold and progression rules live in one place
    - Single writer per instance: no lock here. The shell serializes concurrent
      callers (see services/todo_list_service.py)
    - Events recorded in memory, drained by the shell via pull_events()
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable

from todolist.core.domain_types import FailureKind, ItemId
from todolist.core.events import (
    DomainEvent, ItemCreated, ItemRemoved, ItemUpdated, ProgressionRegistered,
)
from todolist.core.progression import Progression, as_utc
from todolist.core.repository_protocols import CategoryValidator
from todolist.core.result import Result
from todolist.core.specifications import (
    ProgressionCandidate,
    Specification,
    can_modify_item,
    valid_progression,
)
from todolist.core.todo_item import TodoItem


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class TodoList:
    """Aggregate root owning all TodoItems of one logical list."""

    def __init__(
        self,
        category_validator: CategoryValidator,
        can_modify: Specification[TodoItem] | None = None,
        progression_rules: Specification[ProgressionCandidate] | None = None,
    ):
        self._category_validator = category_validator
        self._can_modify = can_modify or can_modify_item()
        self._progression_rules = progression_rules or valid_progression()
        self._items: dict[ItemId, TodoItem] = {}
        self._events: list[DomainEvent] = []

    # --- Commands -----------------------------------------------------------------

    def add_item(
        self, item_id: ItemId, title: str, description: str, category: str,
    ) -> Result[TodoItem]:
        if not self._category_validator.is_valid_category(category):
            return Result.failure(
                f"Category '{category}' is not valid.",
                FailureKind.INVALID_CATEGORY,
                category=category,
            )

        item = TodoItem(item_id, title, description, category)
        self._items[item_id] = item
        self._events.append(
            ItemCreated(item_id=item_id, title=title, category=category),
        )
        return Result.success(item)

    def update_item(self, item_id: ItemId, description: str) -> Result[TodoItem]:
        found = self._get_modifiable(item_id)
        if found.is_failure:
            return found

        item = found.value
        item._replace_description(description)
        self._events.append(
            ItemUpdated(item_id=item_id, new_description=description),
        )
        return Result.success(item)

    def remove_item(self, item_id: ItemId) -> Result[TodoItem]:
        found = self._get_modifiable(item_id)
        if found.is_failure:
            return found

        item = self._items.pop(item_id)
        self._events.append(ItemRemoved(item_id=item_id))
        return Result.success(item)

    def register_progression(
        self,
        item_id: ItemId,
        date: datetime,
        percent: Decimal | int | float | str,
    ) -> Result[Progression]:
        item = self._items.get(item_id)
        if item is None:
            return self._not_found(item_id)

        date = as_utc(date)
        percent = _to_decimal(percent)
        candidate = ProgressionCandidate(
            date=date,
            percent=percent,
            last_date=item.last_progression_date,
            current_total=item.total_progress,
        )
        violation = self._progression_rules.evaluate(candidate)
        if violation is not None:
            return Result.failure(
                violation.message,
                FailureKind.INVALID_PROGRESSION,
                item_id=item_id,
                rule=violation.rule,
                reason=violation.message,
            )

        progression = item._append_progression(date, percent)
        self._events.append(
            ProgressionRegistered(
                item_id=item_id,
                progression_date=date,
                percent=percent,
                total_progress=item.total_progress,
            ),
        )
        return Result.success(progression)

    # --- Queries ------------------------------------------------------------------

    def get_all_items(self) -> tuple[TodoItem, ...]:
        return tuple(self._items[key] for key in sorted(self._items))

    def find_item(self, item_id: ItemId) -> TodoItem | None:
        return self._items.get(item_id)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    # --- Rehydration & events -----------------------------------------------------

    def restore_item(
        self,
        item_id: ItemId,
        title: str,
        description: str,
        category: str,
        progressions: Iterable[tuple[datetime, Decimal]] = (),
    ) -> TodoItem:
        """Rebuild persisted state, replaying progressions through the live rules.

        The category is not re-validated: admissibility is checked at creation only.
        Raises ResultError when a stored progression violates a rule. Restoring
        records no events.
        """
        pending = len(self._events)
        item = TodoItem(item_id, title, description, category)
        self._items[item_id] = item
        try:
            for date, percent in progressions:
                self.register_progression(item_id, date, percent).unwrap()
        finally:
            del self._events[pending:]
        return item

    def pull_events(self) -> list[DomainEvent]:
        """Return pending events and clear them."""
        events, self._events = self._events, []
        return events

    # --- Internal checks ----------------------------------------------------------

    def _not_found(self, item_id: ItemId) -> Result:
        return Result.failure(
            f"TodoItem with Id {item_id} was not found.",
            FailureKind.ITEM_NOT_FOUND,
            item_id=item_id,
        )

    def _get_modifiable(self, item_id: ItemId) -> Result[TodoItem]:
        item = self._items.get(item_id)
        if item is None:
            return self._not_found(item_id)

        violation = self._can_modify.evaluate(item)
        if violation is not None:
            return Result.failure(
                f"TodoItem with Id {item_id} cannot be modified or removed: "
                f"{violation.message}",
                FailureKind.CANNOT_MODIFY,
                item_id=item_id,
                current_progress=item.total_progress,
            )
        return Result.success(item)
