"""Progression — immutable (date, percent) progress entry owned by a TodoItem.

Invariants:
    - percent is a finite Decimal strictly inside (0, 100)
    - Equality and hashing by value (date, percent)
    - Out-of-range construction raises ValueError: the aggregate pre-checks
      percent, so reaching this branch means its rule logic is broken
    - Dates compared by the core are timezone-aware; as_utc() takes naive ones as UTC
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from todolist.core.domain_types import MIN_PERCENT, MAX_PERCENT


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Progression:
    """One dated percentage-of-completion record."""

    date: datetime
    percent: Decimal

    def __post_init__(self) -> None:
        percent = Decimal(str(self.percent))
        if not percent.is_finite() or not MIN_PERCENT < percent < MAX_PERCENT:
            raise ValueError(
                f"Progression percent must be greater than {MIN_PERCENT} "
                f"and less than {MAX_PERCENT}, got {percent}.",
            )
        object.__setattr__(self, "percent", percent)

    def __str__(self) -> str:
        return f"{self.percent}% on {self.date:%Y-%m-%d}"
