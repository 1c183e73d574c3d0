"""Resilience – bridge backoff/jitter strategies into ``tenacity`` wait callables."""
from __future__ import annotations

import tenacity

from adoptflow.resilience.retry.backoff import BackoffStrategy
from adoptflow.resilience.retry.jitter import FullJitter, JitterStrategy


class StrategyWait(tenacity.wait.wait_base):
    """``tenacity`` wait that delegates to a :class:`BackoffStrategy`.

    Example
    -------
    ::

        retrying = tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(5),
            wait=StrategyWait(ExponentialBackoff(0.5, 30.0), FullJitter()),
        )
    """

    def __init__(self, backoff: BackoffStrategy, jitter: JitterStrategy | None = None) -> None:
        self.backoff = backoff
        self.jitter = jitter or FullJitter()

    def __call__(self, retry_state: tenacity.RetryCallState) -> float:
        return self.jitter.apply(self.backoff.compute(retry_state.attempt_number))


__all__ = ["StrategyWait"]
