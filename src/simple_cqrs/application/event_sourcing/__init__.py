"""Application — Event Sourcing."""

from simple_cqrs.application.event_sourcing.repository import DomainRepository
from simple_cqrs.application.event_sourcing.store import (
    EventStore,
    InMemoryEventStore,
    OptimisticConcurrencyError,
)

__all__ = [
    "DomainRepository",
    "EventStore",
    "InMemoryEventStore",
    "OptimisticConcurrencyError",
]
