"""
Base entity classes for DDD.
"""
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from .domain_event import DomainEvent


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(kw_only=True, eq=False)
class BaseEntity(ABC):
    """
    Base entity class with identity.

    Identity is assigned by the persistence layer, so a freshly built entity
    has ``id=None`` and is only equal to itself.
    """
    id: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))


@dataclass(kw_only=True, eq=False)
class AggregateRoot(BaseEntity):
    """Aggregate root base class with a buffer of pending domain events."""
    _domain_events: List[DomainEvent] = field(default_factory=list, repr=False)

    def add_domain_event(self, event: DomainEvent) -> None:
        """Buffer a domain event until the aggregate is saved."""
        self._domain_events.append(event)

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return and clear all buffered events in one step."""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Get a copy of buffered events."""
        return self._domain_events.copy()
