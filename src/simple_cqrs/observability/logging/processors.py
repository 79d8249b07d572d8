"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def add_aggregate_type(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Render an ``aggregate`` object bound on the event as its type and id.

    Lets call sites write ``log.info("aggregate_saved", aggregate=order)``
    instead of spelling out ``aggregate_type``/``aggregate_id``.
    """
    aggregate = event_dict.pop("aggregate", None)
    if aggregate is not None:
        event_dict.setdefault("aggregate_type", type(aggregate).__name__)
        agg_id = getattr(aggregate, "id", None)
        if agg_id is not None:
            event_dict.setdefault("aggregate_id", str(agg_id))
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger writing through stdlib :mod:`logging`.

    Output stays silent until the host application configures logging
    (see :meth:`JsonLoggerFactory.configure`); structlog processors still
    run, so ``structlog.testing.capture_logs`` sees every event.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["add_aggregate_type", "get_logger"]
