"""Unit tests for structlog configuration and helpers."""

from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
from typing import Iterator

import pytest
import structlog

from simple_cqrs.application.event_sourcing import DomainRepository, InMemoryEventStore
from simple_cqrs.config import LoggingSettings
from simple_cqrs.kernel.ddd import AggregateRoot, DomainEvent
from simple_cqrs.kernel.types import EntityId
from simple_cqrs.observability.logging import JsonLoggerFactory, add_aggregate_type, get_logger


class _Agg:
    id = EntityId("order-7")


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestAddAggregateType:
    def test_expands_aggregate(self) -> None:
        out = add_aggregate_type(None, "info", {"event": "x", "aggregate": _Agg()})
        assert out == {"event": "x", "aggregate_type": "_Agg", "aggregate_id": "order-7"}

    def test_leaves_other_events_alone(self) -> None:
        assert add_aggregate_type(None, "info", {"event": "x"}) == {"event": "x"}


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("test", component="store").info("hello")
        assert logs == [{"component": "store", "event": "hello", "log_level": "info"}]


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_configures_root_level(self) -> None:
        JsonLoggerFactory.configure(LoggingSettings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_reads_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLE_CQRS_LOG_LEVEL", "ERROR")
        settings = JsonLoggerFactory.configure()
        assert settings.log_level == "ERROR"
        assert logging.getLogger().level == logging.ERROR

    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(LoggingSettings(log_level="INFO", log_json=True))
        get_logger("simple_cqrs.test").info("aggregate_saved", aggregate=_Agg(), events=2)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "aggregate_saved"
        assert payload["aggregate_type"] == "_Agg"
        assert payload["aggregate_id"] == "order-7"
        assert payload["events"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "simple_cqrs.test"
        assert "timestamp" in payload


@dataclasses.dataclass
class TicketOpened(DomainEvent):
    pass


@dataclasses.dataclass
class TicketIgnored(DomainEvent):
    pass


class Ticket(AggregateRoot):
    def _on_ticket_opened(self, event: TicketOpened) -> None:
        self.opened = True


class TicketRepository(DomainRepository[Ticket]):
    def _create_empty(self, agg_id: EntityId) -> Ticket:
        return Ticket(agg_id)


class TestUnconfiguredLogging:
    def test_library_is_silent_until_configured(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        ticket = Ticket(EntityId("ticket-1"))
        ticket.apply_event(TicketIgnored())
        for _ in range(3):
            ticket.publish_event(TicketOpened())
        asyncio.run(TicketRepository(InMemoryEventStore()).save(ticket))
        ticket.commit_events()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_debug_events_still_reach_structlog_processors(self) -> None:
        with structlog.testing.capture_logs() as logs:
            Ticket().publish_event(TicketOpened())
        assert [e["event"] for e in logs] == ["event_published", "handler_dispatched"]
