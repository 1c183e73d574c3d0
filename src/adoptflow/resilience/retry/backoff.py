"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure (1-based)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ConstantBackoff(BackoffStrategy):
    """Fixed delay between attempts."""

    def __init__(self, delay: float = 1.0) -> None:
        self._delay = delay

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._delay


class ExponentialBackoff(BackoffStrategy):
    """Delay doubles per failure: ``base_delay * 2^(attempt-1)``, capped at ``max_delay``."""

    def __init__(self, base_delay: float = 0.5, max_delay: float = 30.0) -> None:
        if base_delay < 0 or max_delay < base_delay:
            raise ValueError("require 0 <= base_delay <= max_delay")
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        # cap the exponent so huge attempt counts cannot overflow the float
        exponent = min(max(attempt - 1, 0), 62)
        return min(self._base * (2 ** exponent), self._max)


__all__ = ["BackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]
