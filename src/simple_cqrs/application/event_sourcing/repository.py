"""Application event sourcing – DomainRepository."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from simple_cqrs.application.event_sourcing.store import EventStore
from simple_cqrs.kernel.ddd.aggregate import AggregateRoot
from simple_cqrs.kernel.types.ids import EntityId
from simple_cqrs.observability.logging import get_logger

T = TypeVar("T", bound=AggregateRoot)

_log = get_logger(__name__)


class DomainRepository(Generic[T], abc.ABC):
    """Loads aggregates by replaying their stream and persists new events.

    Subclasses implement :meth:`_create_empty`.

    Example::

        class OrderRepository(DomainRepository[Order]):
            def _create_empty(self, agg_id: EntityId) -> Order:
                return Order(agg_id)

        repo = OrderRepository(store=event_store)
        order = await repo.get_by_id(order_id)
        order.ship()
        await repo.save(order)
    """

    def __init__(self, store: EventStore) -> None:
        self._store = store

    @abc.abstractmethod
    def _create_empty(self, agg_id: EntityId) -> T:
        """Return a blank aggregate instance with *agg_id*."""

    async def get_by_id(self, agg_id: EntityId) -> T | None:
        """Replay stored events; returns ``None`` if the stream is empty."""
        events = await self._store.load(str(agg_id))
        if not events:
            return None
        aggregate = self._create_empty(agg_id)
        aggregate.load_from_history(events)
        _log.info("aggregate_loaded", aggregate=aggregate, events=len(events))
        return aggregate

    async def save(self, aggregate: T) -> None:
        """Append the aggregate's uncommitted events, then commit them.

        The buffer is left untouched when the append fails.
        """
        pending = aggregate.uncommitted_events
        if not pending:
            return
        expected_version = aggregate.current_event_id - len(pending)
        await self._store.append(str(aggregate.id), pending, expected_version)
        aggregate.commit_events()
        _log.info(
            "aggregate_saved",
            aggregate=aggregate,
            events=len(pending),
            version=aggregate.current_event_id,
        )


__all__ = ["DomainRepository"]
