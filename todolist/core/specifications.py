"""Specifications — composable business predicates over a candidate value.

Invariants:
    - check() is PURE: returns a Violation on failure, None on success, no state touched
    - and_/or_/not_ return a NEW Specification; operands are never mutated
    - is_satisfied_by()/evaluate() record last_reason on the evaluated spec only
    - last_reason is "" after a satisfied evaluation

Design Decisions:
    - Plain predicate values (a check function closed over its parameters) wrapped by
      one Specification class; no subclass per rule
    - Violation carries a rule name so the aggregate can tell sub-checks apart
      without re-deriving them
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Generic, NamedTuple, TypeVar

from todolist.core.domain_types import (
    MAX_PERCENT,
    MAX_TOTAL_PROGRESS,
    MIN_PERCENT,
    MODIFICATION_THRESHOLD,
    ProgressionRule,
)
from todolist.core.todo_item import TodoItem

T = TypeVar("T")


@dataclass(frozen=True)
class Violation:
    """Why a candidate failed a specification."""
    rule: str
    message: str


class Specification(Generic[T]):
    """A named predicate with AND/OR/NOT composition."""

    def __init__(self, name: str, check: Callable[[T], Violation | None]):
        self.name = name
        self._check = check
        self.last_reason = ""

    def check(self, candidate: T) -> Violation | None:
        return self._check(candidate)

    def evaluate(self, candidate: T) -> Violation | None:
        """Check the candidate and remember the reason for a failure."""
        violation = self._check(candidate)
        self.last_reason = violation.message if violation else ""
        return violation

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.evaluate(candidate) is None

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return and_(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return or_(self, other)

    def __invert__(self) -> "Specification[T]":
        return not_(self)

    def __repr__(self) -> str:
        return f"Specification({self.name!r})"


# ─── Combinators ─────────────────────────────────────────────────

def and_(left: Specification[T], right: Specification[T]) -> Specification[T]:
    """Both must hold. The first failing operand supplies the violation."""
    def check(candidate: T) -> Violation | None:
        return left.check(candidate) or right.check(candidate)
    return Specification(f"({left.name} and {right.name})", check)


def or_(left: Specification[T], right: Specification[T]) -> Specification[T]:
    """Either may hold. When both fail, their reasons are joined."""
    name = f"({left.name} or {right.name})"

    def check(candidate: T) -> Violation | None:
        left_violation = left.check(candidate)
        if left_violation is None:
            return None
        right_violation = right.check(candidate)
        if right_violation is None:
            return None
        return Violation(
            name, f"{left_violation.message}; {right_violation.message}",
        )
    return Specification(name, check)


def not_(spec: Specification[T]) -> Specification[T]:
    """Negation. Fails exactly when the wrapped spec holds."""
    name = f"not {spec.name}"

    def check(candidate: T) -> Violation | None:
        if spec.check(candidate) is None:
            return Violation(name, f"Expected '{spec.name}' not to be satisfied")
        return None
    return Specification(name, check)


# ─── Modification lockout ────────────────────────────────────────

def can_modify_item(
    threshold: Decimal = MODIFICATION_THRESHOLD,
) -> Specification[TodoItem]:
    """Item total progress at or below threshold (exactly 50 still modifiable)."""
    def check(item: TodoItem) -> Violation | None:
        total = item.total_progress
        if total > threshold:
            return Violation(
                "modification_threshold",
                f"Item cannot be modified because it has {total}% progress "
                f"(maximum allowed: {threshold}%)",
            )
        return None
    return Specification("can_modify_item", check)


# ─── Progression validity ────────────────────────────────────────

class ProgressionCandidate(NamedTuple):
    """A progression about to be appended, with the item state it lands on."""
    date: datetime
    percent: Decimal
    last_date: datetime | None
    current_total: Decimal


def percent_in_bounds(
    minimum: Decimal = MIN_PERCENT, maximum: Decimal = MAX_PERCENT,
) -> Specification[ProgressionCandidate]:
    def check(candidate: ProgressionCandidate) -> Violation | None:
        if not candidate.percent.is_finite():
            return Violation(
                ProgressionRule.PERCENT_BOUNDS.value,
                f"Percent must be a finite number, got {candidate.percent}.",
            )
        if candidate.percent <= minimum:
            return Violation(
                ProgressionRule.PERCENT_BOUNDS.value,
                f"Percent must be greater than {minimum}.",
            )
        if candidate.percent >= maximum:
            return Violation(
                ProgressionRule.PERCENT_BOUNDS.value,
                f"Percent must be less than {maximum}.",
            )
        return None
    return Specification(ProgressionRule.PERCENT_BOUNDS.value, check)


def chronological_order() -> Specification[ProgressionCandidate]:
    """Date strictly after the last progression date; the first entry is free.

    Both dates must be timezone-aware. TodoList normalizes them with as_utc.
    """
    def check(candidate: ProgressionCandidate) -> Violation | None:
        if candidate.last_date is not None and candidate.date <= candidate.last_date:
            return Violation(
                ProgressionRule.CHRONOLOGICAL_ORDER.value,
                "The progression date must be greater than all existing "
                f"progression dates (last: {candidate.last_date.isoformat()}).",
            )
        return None
    return Specification(ProgressionRule.CHRONOLOGICAL_ORDER.value, check)


def within_progress_ceiling(
    ceiling: Decimal = MAX_TOTAL_PROGRESS,
) -> Specification[ProgressionCandidate]:
    """Cumulative total may reach the ceiling exactly, never exceed it."""
    def check(candidate: ProgressionCandidate) -> Violation | None:
        if candidate.current_total + candidate.percent > ceiling:
            return Violation(
                ProgressionRule.PROGRESS_CEILING.value,
                f"Adding {candidate.percent}% would exceed {ceiling}% total "
                f"progress. Current progress: {candidate.current_total}%",
            )
        return None
    return Specification(ProgressionRule.PROGRESS_CEILING.value, check)


def valid_progression() -> Specification[ProgressionCandidate]:
    """Bounds, then chronology, then ceiling; the first violation wins."""
    return and_(
        and_(percent_in_bounds(), chronological_order()),
        within_progress_ceiling(),
    )
