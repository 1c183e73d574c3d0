"""RabbitMQ adapter – dead-letter queue sink."""
from __future__ import annotations

import base64

from adoptflow.adapters.rabbitmq.bus import RabbitMQMessageBus
from adoptflow.kernel.messaging import DeadLetterEntry, DeadLetterSink, canonical_json


class RabbitMQDeadLetterSink(DeadLetterSink):
    """Publishes dead letters as persistent messages on a durable queue.

    Operators inspect the queue with the broker's own tooling; the original
    body travels base64-encoded so it is replayed byte for byte.
    """

    def __init__(self, bus: RabbitMQMessageBus, queue: str = "webhook.dead_letter") -> None:
        self._bus = bus
        self._queue = queue

    async def push(self, entry: DeadLetterEntry) -> None:
        body = canonical_json(
            {
                "id": entry.id,
                "message_id": entry.message_id,
                "event_type": entry.event_type,
                "payload": base64.b64encode(entry.payload).decode("ascii"),
                "reason": entry.reason,
                "retry_count": entry.retry_count,
                "failed_at": entry.failed_at.isoformat(),
            }
        )
        await self._bus.publish_raw(
            self._queue,
            body,
            message_id=entry.id,
            message_type="dead_letter",
            headers={"x-original-message-id": entry.message_id, "x-reason": entry.reason},
        )


__all__ = ["RabbitMQDeadLetterSink"]
