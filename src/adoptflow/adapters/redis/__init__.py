"""Redis adapter – idempotency ledger on SET NX."""
from adoptflow.adapters.redis.idempotency import RedisIdempotencyStore

__all__ = ["RedisIdempotencyStore"]
