"""AggregateRoot — applies, records and sequences domain events."""

from __future__ import annotations

from typing import Any, ClassVar, Iterable

from simple_cqrs.kernel.ddd.domain_event import DomainEvent
from simple_cqrs.kernel.ddd.entity import Entity
from simple_cqrs.kernel.ddd.handlers import DEFAULT_HANDLER_PREFIX, HandlerResolver
from simple_cqrs.kernel.types.ids import EntityId
from simple_cqrs.observability.logging import get_logger

_log = get_logger(__name__)


class AggregateRoot(Entity):
    """Event-sourced aggregate root.

    State changes happen only through events.  Business methods build an
    event and hand it to :meth:`publish_event`; the event is sequenced,
    buffered until the repository commits it, and applied through the
    handler named after it (``OrderPlaced`` -> ``on_order_placed``).

    Example::

        @dataclasses.dataclass
        class OrderPlaced(DomainEvent):
            total: int = 0

        class Order(AggregateRoot):
            def place(self, total: int) -> None:
                self.publish_event(OrderPlaced(total=total))

            def _on_order_placed(self, event: OrderPlaced) -> None:
                self.total = event.total

    Handler tables are built when the subclass is created, so a class
    declaring two handlers for one event fails at import time with
    :class:`~simple_cqrs.kernel.errors.AmbiguousHandlerError`.
    """

    handler_prefix: ClassVar[str] = DEFAULT_HANDLER_PREFIX

    _current_event_id: int
    _uncommitted_events: list[DomainEvent]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        HandlerResolver.for_type(cls, cls.handler_prefix)

    def __init__(self, id: EntityId | None = None) -> None:  # noqa: A002
        super().__init__(id)
        self._current_event_id = 0
        self._uncommitted_events = []

    @property
    def current_event_id(self) -> int:
        """Sequence number of the last published or replayed event."""
        return self._current_event_id

    @property
    def uncommitted_events(self) -> tuple[DomainEvent, ...]:
        """Events published since the last commit, in publish order."""
        return tuple(self._uncommitted_events)

    def apply_event(self, event: DomainEvent) -> None:
        """Apply *event* to in-memory state without recording it.

        Used for replay.  The event's ``event_id`` is left untouched; when it
        carries a stamped id ahead of :attr:`current_event_id` the counter is
        moved up to it so that later publishes continue the sequence.
        """
        HandlerResolver.for_type(type(self), self.handler_prefix).dispatch(self, event)
        if event.event_id > self._current_event_id:
            self._current_event_id = event.event_id

    def load_from_history(self, events: Iterable[DomainEvent]) -> None:
        """Replay *events* in the order given."""
        for event in events:
            self.apply_event(event)

    def publish_event(self, event: DomainEvent) -> None:
        """Sequence, record and apply a newly produced *event*."""
        event.event_id = self._current_event_id + 1
        self._current_event_id = event.event_id
        if event.aggregate_id is None:
            event.aggregate_id = str(self.id)
        self._uncommitted_events.append(event)
        _log.debug(
            "event_published",
            aggregate_type=type(self).__name__,
            aggregate_id=str(self.id),
            event_type=event.event_type,
            event_id=event.event_id,
        )
        self.apply_event(event)

    def commit_events(self) -> None:
        """Forget buffered events once the caller has persisted them."""
        if not self._uncommitted_events:
            return
        count = len(self._uncommitted_events)
        self._uncommitted_events.clear()
        _log.debug(
            "events_committed",
            aggregate_type=type(self).__name__,
            aggregate_id=str(self.id),
            count=count,
            current_event_id=self._current_event_id,
        )


__all__ = ["AggregateRoot"]
