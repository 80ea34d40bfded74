"""Todo Schemas — Pydantic models for todo item and progression endpoints.

Invariants:
    - TodoItemCreate.title: 1-100 chars, stripped, non-empty
    - description: at most 500 chars
    - ProgressionCreate.percent: Decimal with at most 2 decimal places (matches storage)
    - ProgressionCreate.date is normalized to UTC (naive input taken as UTC)

Design Decisions:
    - percent range NOT constrained here: the aggregate owns the (0, 100) rule and
      reports it as INVALID_PROGRESSION
"""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from todolist.core.todo_item import TodoItem


class TodoItemCreate(BaseModel):
    """Item creation — validates title/description length."""
    title: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=500)
    category: str = Field(min_length=1, max_length=50)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TodoItemUpdate(BaseModel):
    description: str = Field(max_length=500)


class ProgressionCreate(BaseModel):
    date: datetime
    percent: Decimal = Field(max_digits=5, decimal_places=2)

    @field_validator("date")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class ProgressionResponse(BaseModel):
    date: datetime
    percent: Decimal


class TodoItemResponse(BaseModel):
    """Public-facing item with derived progress fields."""
    id: int
    title: str
    description: str
    category: str
    total_progress: Decimal
    is_completed: bool
    last_progression_date: datetime | None
    progressions: list[ProgressionResponse]

    @classmethod
    def from_domain(cls, item: TodoItem) -> "TodoItemResponse":
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            category=item.category,
            total_progress=item.total_progress,
            is_completed=item.is_completed,
            last_progression_date=item.last_progression_date,
            progressions=[
                ProgressionResponse(date=p.date, percent=p.percent)
                for p in item.progressions
            ],
        )


class TodoItemListResponse(BaseModel):
    items: list[TodoItemResponse]


class CategoriesResponse(BaseModel):
    categories: list[str]
