"""Unit tests for the no-op, logging and configured publishers."""
from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.testing import capture_logs

from aircraft_events.adapters.eventbridge import EventBridgePublisher
from aircraft_events.application.outbox import PublishCoordinator
from aircraft_events.application.outbox import coordinator as coordinator_module
from aircraft_events.application.publishing import (
    LoggingEventPublisher,
    NoopEventPublisher,
    create_event_publisher,
)
from aircraft_events.config import EventSettings
from aircraft_events.observability.logging import DEFAULT_SENSITIVE_FIELDS, JsonLoggerFactory, get_logger
from aircraft_events.testing.fakes import InMemoryDeliveryLedger
from conftest import make_event


@pytest.fixture
def json_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    # Module-level loggers cache their configuration on first use.
    monkeypatch.setattr(coordinator_module, "logger", get_logger(coordinator_module.__name__))
    JsonLoggerFactory.configure("INFO", DEFAULT_SENSITIVE_FIELDS)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestNoopEventPublisher:
    def test_accepts_everything(self) -> None:
        async def run() -> None:
            publisher = NoopEventPublisher()
            await publisher.publish(make_event())
            await publisher.publish_batch([make_event(), make_event()])
            await publisher.publish_batch([])
            await publisher.aclose()
        asyncio.run(run())


class TestLoggingEventPublisher:
    def test_logs_full_payload(self) -> None:
        async def run() -> None:
            event = make_event()
            with capture_logs() as logs:
                await LoggingEventPublisher().publish(event)
            assert logs == [
                {
                    "event": "domain_event.published",
                    "log_level": "info",
                    "event_id": event.id,
                    "event_type": "aircraft.status.changed",
                    "payload": event.to_payload(),
                }
            ]
        asyncio.run(run())

    def test_batch_logs_each_event(self) -> None:
        async def run() -> None:
            events = [make_event() for _ in range(3)]
            with capture_logs() as logs:
                await LoggingEventPublisher().publish_batch(events)
            assert [entry["event_id"] for entry in logs] == [e.id for e in events]
        asyncio.run(run())

    def test_publishes_through_configured_json_logging(
        self, json_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        event = make_event()
        ledger = InMemoryDeliveryLedger()

        async def run() -> None:
            await PublishCoordinator(ledger, LoggingEventPublisher()).publish_safely(event)
            record = await ledger.get(event.id)
            assert record is not None
            assert record.published is True
            assert record.last_error is None
        asyncio.run(run())

        lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        published = [line for line in lines if line["event"] == "domain_event.published"]
        assert len(published) == 1
        assert published[0]["event_id"] == event.id
        assert published[0]["payload"]["detail"] == dict(event.detail)
        assert published[0]["payload"]["meta"]["actor_email"] == "[REDACTED]"
        assert published[0]["payload"]["meta"]["actor_id"] == "user-1"

    def test_sink_failure_propagates(self) -> None:
        async def run() -> None:
            logger = MagicMock()
            logger.info.side_effect = OSError("disk full")
            with pytest.raises(OSError):
                await LoggingEventPublisher(logger=logger).publish(make_event())
        asyncio.run(run())


class TestCreateEventPublisher:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("noop", NoopEventPublisher),
            ("log", LoggingEventPublisher),
            ("eventbridge", EventBridgePublisher),
        ],
    )
    def test_selects_by_setting(self, kind: str, expected: type) -> None:
        assert isinstance(create_event_publisher(EventSettings(event_publisher=kind)), expected)

    def test_eventbridge_config_from_settings(self) -> None:
        settings = EventSettings(
            event_publisher="eventbridge",
            eventbridge_event_bus_name="ops-bus",
            aws_region="ap-southeast-2",
            aws_eventbridge_endpoint="http://localhost:4566",
        )
        publisher = create_event_publisher(settings)
        entry = publisher.to_entry(make_event())
        assert entry["EventBusName"] == "ops-bus"
