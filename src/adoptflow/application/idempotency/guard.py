"""Application idempotency – IdempotencyGuard.

Gives at-most-once side-effect semantics on top of an at-least-once
transport. The guard claims the message id through a single atomic
``try_register`` call; only the caller that wins the claim runs the handler.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from adoptflow.kernel.messaging import IdempotencyStore, MessageId
from adoptflow.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class IdempotencyGuard:
    """Run a handler at most once per ``message_id``.

    * Duplicate (already claimed) → logs ``duplicate_suppressed`` and returns
      ``None``; the handler is not invoked and nothing is raised.
    * First delivery → awaits the handler and returns its result. A handler
      failure propagates, and the claim is kept: a failed message is never
      reprocessed.
    * Store failure → :class:`IdempotencyStoreUnavailableError` propagates and
      the handler is not invoked.
    """

    def __init__(self, store: IdempotencyStore) -> None:
        self._store = store

    async def run(self, message_id: MessageId, handler: Callable[[], Awaitable[T]]) -> T | None:
        if not await self._store.try_register(message_id):
            logger.info("duplicate_suppressed", message_id=message_id)
            return None
        return await handler()


__all__ = ["IdempotencyGuard"]
