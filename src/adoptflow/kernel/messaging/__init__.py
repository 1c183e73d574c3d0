"""Kernel messaging – envelope, event schemas, idempotency and dead-letter ports."""
from adoptflow.kernel.messaging.message import (
    EventType,
    MessageBus,
    MessageEnvelope,
    MessageId,
)
from adoptflow.kernel.messaging.serializer import EnvelopeSerializer, canonical_json
from adoptflow.kernel.messaging.events import (
    EMAIL_PATTERN,
    HEADER_VALUE_PATTERN,
    PAYLOAD_SCHEMAS,
    AdoptionCreated,
    AdoptionRequested,
    EventPayload,
    EventTypes,
    WebhookPublish,
    parse_payload,
)
from adoptflow.kernel.messaging.idempotency import (
    IdempotencyRecord,
    IdempotencyStore,
)
from adoptflow.kernel.messaging.dead_letter import (
    DeadLetterEntry,
    DeadLetterSink,
    DeadLetterStore,
)

__all__ = [
    "EMAIL_PATTERN",
    "HEADER_VALUE_PATTERN",
    "PAYLOAD_SCHEMAS",
    "AdoptionCreated",
    "AdoptionRequested",
    "DeadLetterEntry",
    "DeadLetterSink",
    "DeadLetterStore",
    "EnvelopeSerializer",
    "EventPayload",
    "EventType",
    "EventTypes",
    "IdempotencyRecord",
    "IdempotencyStore",
    "MessageBus",
    "MessageEnvelope",
    "MessageId",
    "WebhookPublish",
    "canonical_json",
    "parse_payload",
]
