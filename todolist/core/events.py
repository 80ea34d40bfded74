"""Domain Events — records of successful TodoList mutations.

Invariants:
    - Events are immutable and only recorded after a mutation succeeded
    - Every event has a unique event_id and a UTC occurred_on timestamp

Design Decisions:
    - Recorded by the aggregate, drained by the shell via TodoList.pull_events()
      (the core never publishes or logs anything itself)
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from todolist.core.domain_types import ItemId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)
    occurred_on: datetime = field(default_factory=_utcnow)
    item_id: ItemId

    @property
    def event_type(self) -> str:
        return type(self).__name__


@dataclass(frozen=True, kw_only=True)
class ItemCreated(DomainEvent):
    title: str
    category: str


@dataclass(frozen=True, kw_only=True)
class ItemUpdated(DomainEvent):
    new_description: str


@dataclass(frozen=True, kw_only=True)
class ItemRemoved(DomainEvent):
    pass


@dataclass(frozen=True, kw_only=True)
class ProgressionRegistered(DomainEvent):
    progression_date: datetime
    percent: Decimal
    total_progress: Decimal
