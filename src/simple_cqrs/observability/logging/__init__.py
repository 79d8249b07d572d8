"""Observability – structlog configuration and logger helper."""
from simple_cqrs.observability.logging.factory import JsonLoggerFactory
from simple_cqrs.observability.logging.processors import add_aggregate_type, get_logger

__all__ = ["JsonLoggerFactory", "add_aggregate_type", "get_logger"]
