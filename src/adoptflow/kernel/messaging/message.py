"""Kernel messaging – message envelope and bus port."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from adoptflow.kernel.errors import ValidationError

type EventType = str
type MessageId = str


def _parse_timestamp(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        return raw
    if raw is None or raw == "":
        return datetime.now(UTC)
    if not isinstance(raw, str):
        raise ValidationError(
            "timestamp must be an ISO-8601 string",
            errors=[{"field": "timestamp", "error": "invalid_type"}],
        )
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(
            f"timestamp {raw!r} is not ISO-8601",
            errors=[{"field": "timestamp", "error": "invalid_format"}],
            cause=exc,
        ) from exc


@dataclasses.dataclass(frozen=True)
class MessageEnvelope:
    """Transport-agnostic envelope carried by every inter-service message.

    ``message_id`` is generated once by the producer and preserved unchanged
    through every hop and redelivery; it is the deduplication key.
    """

    event_type: EventType
    payload: dict[str, Any] = dataclasses.field(default_factory=dict)
    message_id: MessageId = dataclasses.field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        return {
            "message_id": self.message_id,
            "event_type": self.event_type,
            "payload": self.payload,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessageEnvelope:
        """Build an envelope from its wire form.

        ``event`` and ``data`` are accepted as aliases of ``event_type`` and
        ``payload`` (the gateway's historical field names).
        """
        if not isinstance(data, Mapping):
            raise ValidationError("envelope must be a JSON object")

        message_id = data.get("message_id")
        event_type = data.get("event_type", data.get("event"))
        payload = data.get("payload", data.get("data", {}))

        errors: list[dict[str, Any]] = []
        if not isinstance(message_id, str) or not message_id.strip():
            errors.append({"field": "message_id", "error": "required"})
        if not isinstance(event_type, str) or not event_type.strip():
            errors.append({"field": "event_type", "error": "required"})
        if not isinstance(payload, Mapping):
            errors.append({"field": "payload", "error": "must_be_object"})
        if errors:
            fields = ", ".join(e["field"] for e in errors)
            raise ValidationError(f"malformed envelope: {fields}", errors=errors)

        return cls(
            event_type=event_type,
            payload=dict(payload),
            message_id=message_id,
            timestamp=_parse_timestamp(data.get("timestamp")),
        )


class MessageBus(abc.ABC):
    """Port: publish envelopes into the broker."""

    @abc.abstractmethod
    async def publish(self, envelope: MessageEnvelope) -> None: ...

    async def emit(
        self,
        event_type: EventType,
        payload: Mapping[str, Any],
        *,
        message_id: MessageId | None = None,
    ) -> MessageEnvelope:
        """Wrap *payload* in a fresh envelope and publish it."""
        envelope = MessageEnvelope(
            event_type=event_type,
            payload=dict(payload),
            message_id=message_id or str(uuid4()),
        )
        await self.publish(envelope)
        return envelope


__all__ = [
    "EventType",
    "MessageBus",
    "MessageEnvelope",
    "MessageId",
]
