"""Domain Types — identities, rule constants and failure kinds for the todo list core.

Invariants:
    - MODIFICATION_THRESHOLD (50) is exclusive: exactly 50 is still modifiable
    - MAX_TOTAL_PROGRESS (100) is inclusive: a total of exactly 100 completes the item
    - A single progression percent lies strictly between MIN_PERCENT and MAX_PERCENT
    - All failure kinds encoded as Enums — no raw string matching

Design Decisions:
    - Decimal for percents: 50.01 must compare above 50 without float drift
    - str Enums: serialize to JSON without custom encoders
"""

from decimal import Decimal
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)


# ─── Rule Constants ──────────────────────────────────────────────

MODIFICATION_THRESHOLD: Decimal = Decimal("50")
MAX_TOTAL_PROGRESS: Decimal = Decimal("100")
MIN_PERCENT: Decimal = Decimal("0")
MAX_PERCENT: Decimal = Decimal("100")

PROGRESS_BAR_WIDTH: int = 50


# ─── Enums ───────────────────────────────────────────────────────

class FailureKind(str, Enum):
    """Business failures reported by the TodoList aggregate."""
    ITEM_NOT_FOUND = "item_not_found"
    INVALID_CATEGORY = "invalid_category"
    CANNOT_MODIFY = "cannot_modify"
    INVALID_PROGRESSION = "invalid_progression"


class ProgressionRule(str, Enum):
    """Sub-checks of a progression registration, in evaluation order."""
    PERCENT_BOUNDS = "percent_bounds"
    CHRONOLOGICAL_ORDER = "chronological_order"
    PROGRESS_CEILING = "progress_ceiling"
