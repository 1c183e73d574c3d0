"""Resilience – retry backoff and jitter strategies."""
