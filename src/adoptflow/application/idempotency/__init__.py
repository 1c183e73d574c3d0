"""Application idempotency – at-most-once handler execution."""
from adoptflow.application.idempotency.guard import IdempotencyGuard

__all__ = ["IdempotencyGuard"]
