"""Item Report Formatting — tests for the plain-text rendering.

Tests cover:
    - header line with id, title, description, category, completion flag
    - one cumulative line per progression, 50-cell bar
    - blank line only after items that have progressions
"""

from datetime import datetime, timezone
from decimal import Decimal

from todolist.core.format_items import format_items, format_progress_bar


def _day(n: int) -> datetime:
    return datetime(2024, 1, n, tzinfo=timezone.utc)


def test_progress_bar_empty_and_full():
    assert format_progress_bar(Decimal("0")) == "|" + " " * 50 + "|"
    assert format_progress_bar(Decimal("100")) == "|" + "O" * 50 + "|"


def test_progress_bar_rounds_to_cells():
    bar = format_progress_bar(Decimal("30"))
    assert bar.count("O") == 15
    assert len(bar) == 52


def test_progress_bar_rounds_half_to_even():
    # 5% of 50 cells = 2.5 -> 2; 15% = 7.5 -> 8
    assert format_progress_bar(Decimal("5")).count("O") == 2
    assert format_progress_bar(Decimal("15")).count("O") == 8


def test_item_without_progress_renders_header_only(todo_list):
    todo_list.add_item(1, "Learn X", "desc", "Work")
    assert format_items(todo_list.get_all_items()) == (
        "1) Learn X - desc (Work) Completed:False"
    )


def test_item_with_progress_renders_cumulative_lines(todo_list):
    todo_list.add_item(1, "Learn X", "desc", "Work")
    todo_list.register_progression(1, _day(1), "30")
    todo_list.register_progression(1, _day(2), "70")
    lines = format_items(todo_list.get_all_items()).split("\n")
    assert lines[0] == "1) Learn X - desc (Work) Completed:True"
    assert lines[1] == "2024-01-01 - 30% |" + "O" * 15 + " " * 35 + "|"
    assert lines[2] == "2024-01-02 - 100% |" + "O" * 50 + "|"
    assert lines[3] == ""


def test_items_rendered_in_given_order(todo_list):
    todo_list.add_item(2, "B", "d", "Work")
    todo_list.add_item(1, "A", "d", "Work")
    text = format_items(todo_list.get_all_items())
    assert text.index("1) A") < text.index("2) B")
