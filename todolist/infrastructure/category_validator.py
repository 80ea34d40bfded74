"""Static Category Validator — admissible categories from settings, case-insensitive.

Invariants:
    - Matching is case-insensitive; blank or whitespace-only names are never valid
    - get_valid_categories() returns the configured spellings, not the folded keys
"""

from typing import Iterable


class StaticCategoryValidator:
    """CategoryValidator backed by a fixed list of names."""

    def __init__(self, categories: Iterable[str]):
        self._categories = frozenset(categories)
        self._folded = frozenset(c.casefold() for c in self._categories)

    def is_valid_category(self, category: str) -> bool:
        if not category or not category.strip():
            return False
        return category.casefold() in self._folded

    def get_valid_categories(self) -> frozenset[str]:
        return self._categories
