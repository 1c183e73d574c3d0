"""Application layer – idempotency guard, workflow orchestrator and consumers."""
