"""Redis adapter – RedisIdempotencyStore."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from adoptflow.kernel.errors import IdempotencyStoreUnavailableError
from adoptflow.kernel.messaging import IdempotencyRecord, IdempotencyStore
from adoptflow.kernel.time import Clock, SystemClock


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'adoptflow[redis]' to use the Redis adapter") from exc


class RedisIdempotencyStore(IdempotencyStore):
    """Idempotency ledger backed by ``SET key value NX``.

    The value is the ISO timestamp of the claim. Pass *ttl* (seconds) to let
    old claims expire; leave it ``None`` to keep them forever.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379",
        *,
        prefix: str = "adoptflow:processed:",
        ttl: int | None = None,
        clock: Clock | None = None,
        **kwargs: Any,
    ) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, **kwargs)
        self._errors = (aioredis.RedisError, OSError)
        self._prefix = prefix
        self._ttl = ttl
        self._clock = clock or SystemClock()

    def _key(self, message_id: str) -> str:
        return f"{self._prefix}{message_id}"

    async def try_register(self, message_id: str) -> bool:
        try:
            created = await self._client.set(
                self._key(message_id),
                self._clock.now().isoformat(),
                nx=True,
                ex=self._ttl,
            )
        except self._errors as exc:
            raise IdempotencyStoreUnavailableError(message_id, cause=exc) from exc
        return bool(created)

    async def get(self, message_id: str) -> IdempotencyRecord | None:
        try:
            raw = await self._client.get(self._key(message_id))
        except self._errors as exc:
            raise IdempotencyStoreUnavailableError(message_id, cause=exc) from exc
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode()
        return IdempotencyRecord(message_id=message_id, processed_at=datetime.fromisoformat(raw))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisIdempotencyStore"]
