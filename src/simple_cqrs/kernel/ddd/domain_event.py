"""Domain events."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime


@dataclasses.dataclass(kw_only=True)
class DomainEvent:
    """Base class for domain events.

    ``event_id`` is the per-aggregate sequence number.  It stays ``0`` until
    the event is published by an :class:`~simple_cqrs.kernel.ddd.AggregateRoot`,
    which stamps it; events loaded from an event store already carry it.

    Subclasses should be dataclasses adding their own payload fields.

    Example::

        @dataclasses.dataclass
        class OrderPlaced(DomainEvent):
            order_id: str
            total: int = 0
    """

    event_id: int = 0
    aggregate_id: str | None = None
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC)
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__

    @property
    def is_published(self) -> bool:
        return self.event_id > 0


__all__ = ["DomainEvent"]
