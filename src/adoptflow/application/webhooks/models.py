"""Application webhooks – delivery attempt bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeliveryStatus(str, Enum):
    PENDING = "PENDING"
    DELIVERED = "DELIVERED"
    DEAD_LETTERED = "DEAD_LETTERED"


@dataclass
class WebhookDeliveryAttempt:
    """Lifetime of one ``webhook.publish`` delivery, across all of its retries."""

    event_id: str
    signature: str = ""
    attempt_count: int = 0
    status: DeliveryStatus = DeliveryStatus.PENDING
    http_status: int | None = None
    last_error: str | None = None
    dead_letter_id: str | None = None

    @property
    def delivered(self) -> bool:
        return self.status is DeliveryStatus.DELIVERED


__all__ = ["DeliveryStatus", "WebhookDeliveryAttempt"]
