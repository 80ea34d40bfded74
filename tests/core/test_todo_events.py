"""Domain Events — tests for events recorded by the TodoList aggregate.

Tests cover:
    - each successful command records exactly one event of the matching type
    - failed commands record nothing
    - pull_events drains the pending list
    - events carry unique ids and UTC timestamps
"""

from datetime import datetime, timezone
from decimal import Decimal

from todolist.core.events import (
    ItemCreated, ItemRemoved, ItemUpdated, ProgressionRegistered,
)


def _day(n: int) -> datetime:
    return datetime(2024, 1, n, tzinfo=timezone.utc)


def test_add_item_records_item_created(todo_list):
    todo_list.add_item(1, "Learn X", "desc", "Work")
    events = todo_list.pull_events()
    assert len(events) == 1
    event = events[0]
    assert isinstance(event, ItemCreated)
    assert (event.item_id, event.title, event.category) == (1, "Learn X", "Work")
    assert event.event_type == "ItemCreated"


def test_update_remove_and_progression_events(todo_list):
    todo_list.add_item(1, "t", "d", "Work")
    todo_list.update_item(1, "new")
    todo_list.register_progression(1, _day(1), "20")
    todo_list.remove_item(1)
    events = todo_list.pull_events()
    assert [type(e) for e in events] == [
        ItemCreated, ItemUpdated, ProgressionRegistered, ItemRemoved,
    ]
    assert events[1].new_description == "new"
    assert events[2].percent == Decimal("20")
    assert events[2].total_progress == Decimal("20")
    assert events[2].progression_date == _day(1)


def test_failed_commands_record_nothing(todo_list):
    todo_list.add_item(1, "t", "d", "Bogus")
    todo_list.update_item(9, "x")
    todo_list.remove_item(9)
    todo_list.register_progression(9, _day(1), "10")
    assert todo_list.pull_events() == []


def test_pull_events_drains(todo_list):
    todo_list.add_item(1, "t", "d", "Work")
    assert len(todo_list.pull_events()) == 1
    assert todo_list.pull_events() == []


def test_events_have_unique_ids_and_utc_time(todo_list):
    todo_list.add_item(1, "t", "d", "Work")
    todo_list.add_item(2, "t", "d", "Work")
    first, second = todo_list.pull_events()
    assert first.event_id != second.event_id
    assert first.occurred_on.tzinfo == timezone.utc
