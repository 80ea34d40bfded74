"""Result — explicit success/failure outcome for expected business failures.

Invariants:
    - A success never carries a non-empty error
    - A failure always carries a non-empty error
    - Violating either raises ValueError at construction (never normalized)
    - Result instances are immutable

Design Decisions:
    - Result over exceptions at the aggregate boundary: rule violations are expected
      outcomes, exceptions are reserved for programmer errors
    - kind + details alongside the message: the shell maps kinds to HTTP status
      without parsing error strings
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from todolist.core.domain_types import FailureKind

T = TypeVar("T")


class ResultError(Exception):
    """Raised when a failed Result is unwrapped."""

    def __init__(self, result: "Result"):
        super().__init__(result.error)
        self.result = result


@dataclass(frozen=True)
class Result(Generic[T]):
    """Two-case outcome of an aggregate operation."""

    is_success: bool
    value: T | None = None
    error: str = ""
    kind: FailureKind | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.is_success and self.error:
            raise ValueError("A successful result cannot have an error.")
        if not self.is_success and not self.error:
            raise ValueError("A failed result must have an error.")
        if self.is_success and self.kind is not None:
            raise ValueError("A successful result cannot have a failure kind.")

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(
        cls,
        error: str,
        kind: FailureKind | None = None,
        **details: Any,
    ) -> "Result[T]":
        return cls(is_success=False, error=error, kind=kind, details=details)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def unwrap(self) -> T | None:
        """Return the carried value, or raise ResultError on a failure."""
        if self.is_failure:
            raise ResultError(self)
        return self.value
