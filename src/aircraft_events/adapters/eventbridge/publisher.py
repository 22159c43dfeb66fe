"""EventBridge adapter – EventBridgePublisher (AWS ``PutEvents`` via aiobotocore)."""
from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import json
from typing import Any

from aiobotocore.session import AioSession, get_session
from botocore.exceptions import BotoCoreError, ClientError

from aircraft_events.kernel.errors import PublishError
from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import EventPublisher
from aircraft_events.observability.logging import get_logger

logger = get_logger(__name__)

# PutEvents accepts at most 10 entries per request.
MAX_ENTRIES_PER_REQUEST = 10


@dataclasses.dataclass(frozen=True)
class EventBridgeConfig:
    bus_name: str
    region: str = "us-east-1"
    endpoint_url: str | None = None


class EventBridgePublisher(EventPublisher):
    """Publish domain events to an EventBridge bus.

    The client is created on first use and held until :meth:`aclose`. There
    is no reconnect logic on top of what botocore's transport already does:
    a broken client keeps failing until the publisher is replaced.
    """

    def __init__(self, config: EventBridgeConfig, session: AioSession | None = None) -> None:
        self._config = config
        self._session = session
        self._client: Any = None
        self._exit_stack: contextlib.AsyncExitStack | None = None
        self._lock = asyncio.Lock()

    async def publish(self, event: DomainEvent) -> None:
        response = await self._put_events([self.to_entry(event)])
        entries = response.get("Entries") or []
        entry_result = entries[0] if entries else {}
        if entry_result.get("ErrorCode"):
            code = entry_result["ErrorCode"]
            message = entry_result.get("ErrorMessage") or "unknown error"
            raise PublishError(f"EventBridge publish failed ({code}): {message}", error_code=code)
        if response.get("FailedEntryCount"):
            raise PublishError("EventBridge publish failed: entry rejected without error code")

        logger.info(
            "eventbridge.publish_succeeded",
            region=self._config.region,
            bus_name=self._config.bus_name,
            event_id=event.id,
        )

    async def publish_batch(self, events: list[DomainEvent]) -> None:
        if not events:
            return
        failed = 0
        for start in range(0, len(events), MAX_ENTRIES_PER_REQUEST):
            chunk = events[start:start + MAX_ENTRIES_PER_REQUEST]
            response = await self._put_events([self.to_entry(e) for e in chunk])
            failed += int(response.get("FailedEntryCount") or 0)
        if failed > 0:
            raise PublishError(f"EventBridge batch publish failed for {failed} entries")

        logger.info("eventbridge.batch_published", bus_name=self._config.bus_name, count=len(events))

    async def aclose(self) -> None:
        async with self._lock:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self._client = None

    def to_entry(self, event: DomainEvent) -> dict[str, Any]:
        """Map *event* onto a ``PutEventsRequestEntry``."""
        detail = dict(event.detail)
        aircraft_id = detail.get("aircraftId") or detail.get("aircraft_id") or "unknown"
        return {
            "EventBusName": self._config.bus_name,
            "Source": event.source,
            "DetailType": event.event_type,
            "Detail": json.dumps(
                {
                    "id": event.id,
                    "version": event.version,
                    "occurredAt": event.occurred_at.isoformat(),
                    "detail": detail,
                    "meta": {
                        "actorId": event.meta.actor_id,
                        "actorEmail": event.meta.actor_email,
                        "actorRole": event.meta.actor_role.value,
                    },
                },
                default=str,
            ),
            "Time": event.occurred_at,
            "Resources": [f"aircraft:{aircraft_id}"],
        }

    async def _put_events(self, entries: list[dict[str, Any]]) -> dict[str, Any]:
        client = await self._get_client()
        try:
            return await client.put_events(Entries=entries)
        except ClientError as exc:
            error = exc.response.get("Error", {})
            code = error.get("Code")
            raise PublishError(
                f"EventBridge publish failed ({code}): {error.get('Message') or exc}",
                error_code=code,
                cause=exc,
            ) from exc
        except BotoCoreError as exc:
            raise PublishError(f"EventBridge transport error: {exc}", cause=exc) from exc

    async def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        async with self._lock:
            if self._client is None:
                session = self._session or get_session()
                kwargs: dict[str, Any] = {"region_name": self._config.region}
                if self._config.endpoint_url:
                    kwargs["endpoint_url"] = self._config.endpoint_url
                stack = contextlib.AsyncExitStack()
                self._client = await stack.enter_async_context(session.create_client("events", **kwargs))
                self._exit_stack = stack
        return self._client


__all__ = ["MAX_ENTRIES_PER_REQUEST", "EventBridgeConfig", "EventBridgePublisher"]
