"""Application webhooks – manual replay of dead-lettered notifications."""
from __future__ import annotations

import json

from adoptflow.application.webhooks.engine import WebhookDeliveryEngine
from adoptflow.application.webhooks.models import WebhookDeliveryAttempt
from adoptflow.kernel.errors import NotFoundError, SerializationError
from adoptflow.kernel.messaging import DeadLetterStore, WebhookPublish
from adoptflow.observability.logging import get_logger

logger = get_logger(__name__)


class DeadLetterReplayer:
    """Feeds a dead-lettered notification back through the delivery engine.

    A replay that fails again produces a fresh dead-letter entry; the replayed
    entry is marked either way so it is not listed twice.
    """

    def __init__(self, store: DeadLetterStore, engine: WebhookDeliveryEngine) -> None:
        self._store = store
        self._engine = engine

    async def replay(self, entry_id: str) -> WebhookDeliveryAttempt:
        entry = await self._store.get(entry_id)
        if entry is None:
            raise NotFoundError("dead letter", entry_id)
        try:
            payload = json.loads(entry.payload)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SerializationError(
                f"dead letter '{entry_id}' payload is not JSON",
                payload_type="WebhookPublish",
                cause=exc,
            ) from exc

        attempt = await self._engine.publish_event(WebhookPublish.from_payload(payload))
        await self._store.mark_replayed(entry_id)
        logger.info("dead_letter_replayed", entry_id=entry_id, status=attempt.status.value)
        return attempt

    async def replay_all(self, limit: int = 100) -> list[WebhookDeliveryAttempt]:
        return [await self.replay(entry.id) for entry in await self._store.list(limit)]


__all__ = ["DeadLetterReplayer"]
