"""Kernel time – clocks for adoption timestamps and reconciliation cutoffs.

Everything is timezone-aware UTC; naive datetimes never enter the pipeline.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Source of the current time for ``created_at``, ``processed_at`` and ``failed_at``."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock UTC time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Pinned clock, so tests can place adoptions either side of the reconciliation cutoff."""

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware datetime")
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Move the pinned time forward, e.g. ``clock.advance(minutes=6)``."""
        self._fixed += timedelta(**kwargs)


def utc_now() -> datetime:
    """Current UTC time, for defaults that are not injected."""
    return datetime.now(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
