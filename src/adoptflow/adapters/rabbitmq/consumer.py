"""RabbitMQ adapter – RabbitMQConsumer (one competing worker on a durable queue)."""
from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from adoptflow.adapters.rabbitmq.bus import _require_aio_pika
from adoptflow.application.dispatch import DispatchResult, EventDispatcher
from adoptflow.config import PipelineSettings
from adoptflow.observability.logging import get_logger

logger = get_logger(__name__)


class RabbitMQConsumer:
    """Drains *queue* with manual acknowledgement.

    A message is acked only after the dispatcher has run its handler to
    completion; it is nacked with requeue when the dispatcher asks for
    redelivery. The nack waits ``requeue_delay`` seconds first, so a worker
    facing an unavailable idempotency store does not spin on the same
    message. ``prefetch_count`` bounds how many messages this worker holds
    unacknowledged at once.
    """

    def __init__(
        self,
        url: str,
        queue: str,
        dispatcher: EventDispatcher,
        *,
        prefetch_count: int = 10,
        requeue_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        _require_aio_pika()
        self._url = url
        self._queue_name = queue
        self._dispatcher = dispatcher
        self._prefetch_count = prefetch_count
        self._requeue_delay = requeue_delay
        self._sleep = sleep
        self._connection: Any = None
        self._channel: Any = None
        self._queue: Any = None
        self._consumer_tag: str | None = None

    @classmethod
    def from_settings(
        cls,
        settings: PipelineSettings,
        queue: str,
        dispatcher: EventDispatcher,
        **kwargs: Any,
    ) -> RabbitMQConsumer:
        return cls(
            settings.broker_url,
            queue,
            dispatcher,
            prefetch_count=settings.prefetch_count,
            requeue_delay=settings.requeue_delay_seconds,
            **kwargs,
        )

    async def start(self) -> None:
        aio_pika = _require_aio_pika()
        self._connection = await aio_pika.connect_robust(self._url)
        self._channel = await self._connection.channel()
        await self._channel.set_qos(prefetch_count=self._prefetch_count)
        self._queue = await self._channel.declare_queue(self._queue_name, durable=True)
        self._consumer_tag = await self._queue.consume(self.on_message, no_ack=False)
        logger.info("consumer_started", queue=self._queue_name, prefetch_count=self._prefetch_count)

    async def stop(self) -> None:
        if self._queue is not None and self._consumer_tag is not None:
            await self._queue.cancel(self._consumer_tag)
            self._consumer_tag = None
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            self._channel = None
            self._queue = None
        logger.info("consumer_stopped", queue=self._queue_name)

    async def __aenter__(self) -> RabbitMQConsumer:
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def on_message(self, message: Any) -> DispatchResult:
        result = await self._dispatcher.dispatch_raw(message.body)
        if result.acked:
            await message.ack()
        else:
            if self._requeue_delay > 0:
                await self._sleep(self._requeue_delay)
            await message.nack(requeue=True)
        return result


__all__ = ["RabbitMQConsumer"]
