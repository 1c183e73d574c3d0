"""Resilience – retry with configurable backoff and jitter strategies."""
from adoptflow.resilience.retry.backoff import BackoffStrategy, ConstantBackoff, ExponentialBackoff
from adoptflow.resilience.retry.jitter import FullJitter, JitterStrategy, NoJitter
from adoptflow.resilience.retry.tenacity_adapter import StrategyWait

__all__ = [
    "BackoffStrategy", "ConstantBackoff", "ExponentialBackoff",
    "FullJitter", "JitterStrategy", "NoJitter", "StrategyWait",
]
