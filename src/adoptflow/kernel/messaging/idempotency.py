"""Kernel messaging – idempotency ledger port."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime

from adoptflow.kernel.messaging.message import MessageId


@dataclasses.dataclass(frozen=True)
class IdempotencyRecord:
    """Proof that a message id has been claimed. Never mutated once written."""

    message_id: MessageId
    processed_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))


class IdempotencyStore(abc.ABC):
    """Port: durable ledger of claimed message ids.

    Implementations must make :meth:`try_register` a single atomic
    insert-if-absent against the backing store. Concurrent callers racing on
    the same id must see exactly one ``True``.
    """

    @abc.abstractmethod
    async def try_register(self, message_id: MessageId) -> bool:
        """Claim *message_id*; ``True`` only for the first caller ever.

        Raises :class:`~adoptflow.kernel.errors.IdempotencyStoreUnavailableError`
        when the store cannot be reached; in that case nothing was claimed.
        """

    @abc.abstractmethod
    async def get(self, message_id: MessageId) -> IdempotencyRecord | None:
        """Return the record for *message_id*, or ``None`` if never claimed."""


__all__ = ["IdempotencyRecord", "IdempotencyStore"]
