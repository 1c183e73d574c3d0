"""Application webhooks – signing, delivery with retry, dead-letter replay."""
from adoptflow.application.webhooks.engine import USER_AGENT, WebhookDeliveryEngine
from adoptflow.application.webhooks.models import DeliveryStatus, WebhookDeliveryAttempt
from adoptflow.application.webhooks.replay import DeadLetterReplayer
from adoptflow.application.webhooks.signature import (
    EVENT_ID_HEADER,
    EVENT_TYPE_HEADER,
    SIGNATURE_HEADER,
    WebhookSigner,
)

__all__ = [
    "EVENT_ID_HEADER",
    "EVENT_TYPE_HEADER",
    "SIGNATURE_HEADER",
    "USER_AGENT",
    "DeadLetterReplayer",
    "DeliveryStatus",
    "WebhookDeliveryAttempt",
    "WebhookDeliveryEngine",
    "WebhookSigner",
]
