"""Resilience – jitter applied to webhook retry delays.

Spreads the retries of workers that failed against the same receiver outage.
"""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Turns the capped backoff delay into the delay actually slept."""

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...


class NoJitter(JitterStrategy):
    """Deterministic delays; used by tests and fixed-schedule deployments."""

    def apply(self, delay: float) -> float:
        return delay


class FullJitter(JitterStrategy):
    """Sleep a uniform random time in ``[0, delay]``.

    Pass a seeded ``random.Random`` as *rng* for a reproducible schedule.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def apply(self, delay: float) -> float:
        if delay <= 0:
            return 0.0
        return self._rng.uniform(0, delay)


__all__ = ["FullJitter", "JitterStrategy", "NoJitter"]
