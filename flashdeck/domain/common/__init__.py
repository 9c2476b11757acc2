"""
Building blocks shared by every domain module.

Entities compare by id, value objects by value. Aggregate roots record
DomainEvents that the application layer collects after a successful save.
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import DomainError, EntityNotFoundError, InvariantViolationError, ValidationError
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "InvariantViolationError",
    "ValidationError",
    "ValueObject",
]
