"""DDD building blocks — public re-export surface."""

from simple_cqrs.kernel.ddd.aggregate import AggregateRoot
from simple_cqrs.kernel.ddd.domain_event import DomainEvent
from simple_cqrs.kernel.ddd.entity import Entity
from simple_cqrs.kernel.ddd.handlers import (
    DEFAULT_HANDLER_PREFIX,
    HandlerBinding,
    HandlerResolver,
    event_key,
    handler_name_for,
)

__all__ = [
    "DEFAULT_HANDLER_PREFIX",
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "HandlerBinding",
    "HandlerResolver",
    "event_key",
    "handler_name_for",
]
