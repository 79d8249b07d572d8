"""Application event sourcing – EventStore port and InMemoryEventStore."""

from __future__ import annotations

import abc
from typing import Sequence

from simple_cqrs.kernel.ddd.domain_event import DomainEvent
from simple_cqrs.kernel.errors import ApplicationError


class OptimisticConcurrencyError(ApplicationError):
    """Raised when the expected stream version does not match the current one."""

    default_code = "optimistic_concurrency"

    def __init__(self, aggregate_id: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Concurrency conflict on aggregate '{aggregate_id}': "
            f"expected version {expected}, found {actual}",
            detail={"aggregate_id": aggregate_id, "expected": expected, "actual": actual},
        )
        self.aggregate_id = aggregate_id
        self.expected = expected
        self.actual = actual


class EventStore(abc.ABC):
    """Port — durable append-only store of domain events, one stream per aggregate.

    A stream's version is the ``event_id`` of its last event (``0`` when
    empty).  ``expected_version`` gives **optimistic concurrency control**:
    the store raises :class:`OptimisticConcurrencyError` if the stream has
    moved on since the aggregate was loaded.
    """

    @abc.abstractmethod
    async def append(
        self,
        aggregate_id: str,
        events: Sequence[DomainEvent],
        expected_version: int,
    ) -> None:
        """Append *events* to the stream of *aggregate_id*."""

    @abc.abstractmethod
    async def load(
        self,
        aggregate_id: str,
        from_event_id: int = 0,
    ) -> list[DomainEvent]:
        """Return the stream's events with ``event_id > from_event_id``, in order."""


class InMemoryEventStore(EventStore):
    """In-memory :class:`EventStore` for tests and local development.

    Events are kept as the very objects that were appended.
    """

    def __init__(self) -> None:
        # aggregate_id → ordered list of events
        self._streams: dict[str, list[DomainEvent]] = {}

    async def append(
        self,
        aggregate_id: str,
        events: Sequence[DomainEvent],
        expected_version: int,
    ) -> None:
        actual_version = self.stream_version(aggregate_id)
        if actual_version != expected_version:
            raise OptimisticConcurrencyError(aggregate_id, expected_version, actual_version)
        self._streams.setdefault(aggregate_id, []).extend(events)

    async def load(
        self,
        aggregate_id: str,
        from_event_id: int = 0,
    ) -> list[DomainEvent]:
        stream = self._streams.get(aggregate_id, [])
        return [e for e in stream if e.event_id > from_event_id]

    def stream_version(self, aggregate_id: str) -> int:
        """Current version of the stream: the sequence number its newest event
        was published with, or ``0`` before anything was appended.

        This is the value ``append`` compares ``expected_version`` against.
        """
        stream = self._streams.get(aggregate_id)
        return stream[-1].event_id if stream else 0

    def all_events(self, aggregate_id: str | None = None) -> list[DomainEvent]:
        """Snapshot of stored events for assertions in tests.

        With *aggregate_id*, the events of that aggregate in sequence order;
        otherwise every stream concatenated, one aggregate after another.
        """
        if aggregate_id is not None:
            return list(self._streams.get(aggregate_id, []))
        return [e for stream in self._streams.values() for e in stream]


__all__ = ["EventStore", "InMemoryEventStore", "OptimisticConcurrencyError"]
