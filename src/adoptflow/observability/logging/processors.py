"""Observability – get_logger helper and message-scoped log context."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


@contextmanager
def message_context(message_id: str, event_type: str, **extra: Any) -> Iterator[None]:
    """Bind ``message_id`` / ``event_type`` to every log line emitted inside the block."""
    with structlog.contextvars.bound_contextvars(
        message_id=message_id, event_type=event_type, **extra
    ):
        yield


__all__ = ["get_logger", "message_context"]
