"""Kernel messaging – dead-letter destination ports."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from uuid import uuid4


@dataclasses.dataclass
class DeadLetterEntry:
    """A message that exhausted every delivery attempt."""

    message_id: str
    event_type: str
    payload: bytes
    reason: str
    retry_count: int = 0
    id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    failed_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    replayed: bool = False


class DeadLetterSink(abc.ABC):
    """Port: write side of a dead-letter destination (queue or table)."""

    @abc.abstractmethod
    async def push(self, entry: DeadLetterEntry) -> None:
        """Durably persist *entry*."""
        ...


class DeadLetterStore(DeadLetterSink):
    """Port: dead-letter destination that operators can inspect and replay from."""

    @abc.abstractmethod
    async def list(self, limit: int = 100) -> list[DeadLetterEntry]:
        """Return at most *limit* entries not yet replayed, oldest first."""
        ...

    @abc.abstractmethod
    async def get(self, entry_id: str) -> DeadLetterEntry | None: ...

    @abc.abstractmethod
    async def mark_replayed(self, entry_id: str) -> None: ...


__all__ = ["DeadLetterEntry", "DeadLetterSink", "DeadLetterStore"]
