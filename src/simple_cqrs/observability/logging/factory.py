"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from simple_cqrs.config.settings import EnvSettingsLoader, LoggingSettings
from simple_cqrs.observability.logging.processors import add_aggregate_type


class JsonLoggerFactory:
    """Configure structlog on top of stdlib logging."""

    @staticmethod
    def configure(settings: LoggingSettings | None = None) -> LoggingSettings:
        """Install structlog processors and a root handler.

        Settings are read from the environment when *settings* is omitted.
        Returns the settings that were applied.
        """
        if settings is None:
            settings = EnvSettingsLoader().load(LoggingSettings)

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            add_aggregate_type,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if settings.log_json
            else structlog.dev.ConsoleRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(settings.level)
        return settings


__all__ = ["JsonLoggerFactory"]
