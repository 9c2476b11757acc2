"""
Dispatch of domain events.

Events are collected from an aggregate only after it has been persisted, so
nothing is published for a write that failed.
"""

import structlog

from flashdeck.domain.common import AggregateRoot, DomainEvent, EntityId

logger = structlog.get_logger(__name__)


def dispatch_events(
    aggregate: AggregateRoot,  # type: ignore[type-arg]
    persisted_id: EntityId | None = None,
) -> list[DomainEvent]:
    """
    Collect the aggregate's pending events and write each to the event log.

    Args:
        aggregate: The aggregate that was just saved
        persisted_id: Id assigned by the store, for aggregates saved for the first time
    """
    aggregate_id = (persisted_id or aggregate.id).to_primitive()
    events = aggregate.collect_events()
    for event in events:
        logger.info("domain_event", aggregate_id=aggregate_id, **event.to_dict())
    return events
