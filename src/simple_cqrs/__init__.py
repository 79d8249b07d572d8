"""
simple_cqrs – event-sourced aggregate roots.

Import path convention::

    from simple_cqrs.kernel.ddd import AggregateRoot, DomainEvent
    from simple_cqrs.application.event_sourcing import DomainRepository
    from simple_cqrs.observability.logging import get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
