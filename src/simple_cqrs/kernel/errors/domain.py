"""Domain errors — aggregate model configuration problems."""

from __future__ import annotations

from typing import Any, Sequence

from simple_cqrs.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when the domain model is used or declared incorrectly."""

    default_code = "domain_error"


class AmbiguousHandlerError(DomainError):
    """An aggregate class declares more than one handler for the same event.

    Raised while the aggregate class is being created, never while an
    event is dispatched.
    """

    default_code = "ambiguous_handler"

    def __init__(
        self,
        aggregate_type: str,
        event_key: str,
        handlers: Sequence[str],
        **kwargs: Any,
    ) -> None:
        names = ", ".join(sorted(handlers))
        super().__init__(
            f"{aggregate_type} declares several handlers for '{event_key}': {names}",
            detail={
                "aggregate_type": aggregate_type,
                "event_key": event_key,
                "handlers": sorted(handlers),
            },
            **kwargs,
        )
        self.aggregate_type = aggregate_type
        self.event_key = event_key
        self.handlers = tuple(sorted(handlers))


__all__ = ["AmbiguousHandlerError", "DomainError"]
