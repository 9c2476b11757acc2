"""
Base class for Aggregate Roots.

An aggregate is a cluster of domain objects treated as one unit of
consistency and persistence. Everything outside the aggregate goes through
its root, and the root enforces the invariants of the whole cluster.
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Domain events recorded by mutations are held until the aggregate has
    been persisted, then collected by the application layer.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear all recorded domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def has_pending_changes(self) -> bool:
        """True when a mutation happened since the last collect_events()."""
        return bool(self._events)
