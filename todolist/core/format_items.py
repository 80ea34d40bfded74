"""Item Report Formatting — pure text rendering of a todo list with progress bars.

Invariants:
    - All functions are PURE: same items in, same text out
    - Progress bars are PROGRESS_BAR_WIDTH cells wide, filled cells rounded half-even
    - Items rendered in the order given (callers pass get_all_items())
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable

from todolist.core.domain_types import MAX_TOTAL_PROGRESS, PROGRESS_BAR_WIDTH
from todolist.core.todo_item import TodoItem


def format_progress_bar(percent: Decimal, width: int = PROGRESS_BAR_WIDTH) -> str:
    """`|OOOO    |` — filled share of `width` proportional to percent."""
    filled = int(
        (percent / MAX_TOTAL_PROGRESS * width).quantize(
            Decimal("1"), rounding=ROUND_HALF_EVEN,
        ),
    )
    filled = max(0, min(width, filled))
    return f"|{'O' * filled}{' ' * (width - filled)}|"


def format_item(item: TodoItem) -> list[str]:
    """Header line plus one cumulative line per progression."""
    lines = [
        f"{item.id}) {item.title} - {item.description} "
        f"({item.category}) Completed:{item.is_completed}",
    ]
    cumulative = Decimal("0")
    for progression in item.progressions:
        cumulative += progression.percent
        lines.append(
            f"{progression.date:%Y-%m-%d} - {cumulative}% "
            f"{format_progress_bar(cumulative)}",
        )
    if item.progressions:
        lines.append("")
    return lines


def format_items(items: Iterable[TodoItem]) -> str:
    lines: list[str] = []
    for item in items:
        lines.extend(format_item(item))
    return "\n".join(lines)
