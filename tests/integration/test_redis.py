"""Integration tests for the Redis idempotency store.

Uses testcontainers to spawn a real Redis instance.
Run with: pytest tests/integration/test_redis.py -m integration -v
"""
from __future__ import annotations

import asyncio

import pytest

redis_containers = pytest.importorskip("testcontainers.redis")

from adoptflow.adapters.redis import RedisIdempotencyStore  # noqa: E402
from adoptflow.application.idempotency import IdempotencyGuard  # noqa: E402


def _redis_url(container) -> str:  # type: ignore[no-untyped-def]
    host = container.get_container_host_ip()
    port = container.get_exposed_port(container.port)
    return f"redis://{host}:{port}/0"


@pytest.mark.integration
class TestRedisIdempotencyStoreIntegration:
    def test_concurrent_claims_have_one_winner(self) -> None:
        with redis_containers.RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisIdempotencyStore(url)
                calls: list[int] = []

                async def handler() -> None:
                    calls.append(1)

                guard = IdempotencyGuard(store)
                await asyncio.gather(*(guard.run("same", handler) for _ in range(20)))
                assert calls == [1]
                assert await store.get("same") is not None
                await store.close()

            asyncio.run(run())

    def test_ttl_expires_claim(self) -> None:
        with redis_containers.RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisIdempotencyStore(url, ttl=1)
                assert await store.try_register("m-1")
                await asyncio.sleep(1.5)
                assert await store.try_register("m-1")
                await store.close()

            asyncio.run(run())
