"""Kernel messaging – JSON envelope serializer and canonical encoding."""
from __future__ import annotations

import json
from typing import Any

from adoptflow.kernel.errors import SerializationError
from adoptflow.kernel.messaging.message import MessageEnvelope


def canonical_json(obj: Any) -> bytes:
    """Deterministic UTF-8 JSON: sorted keys, no insignificant whitespace."""
    try:
        return json.dumps(
            obj,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Cannot serialise {type(obj).__name__} to JSON",
            payload_type=type(obj).__name__,
            cause=exc,
        ) from exc


class EnvelopeSerializer:
    """Encode / decode :class:`MessageEnvelope` to JSON bytes."""

    def encode(self, envelope: MessageEnvelope) -> bytes:
        return canonical_json(envelope.to_dict())

    def decode(self, data: bytes) -> MessageEnvelope:
        """Decode raw broker bytes.

        Raises :class:`SerializationError` when *data* is not JSON and
        :class:`~adoptflow.kernel.errors.ValidationError` when the JSON does
        not describe an envelope.
        """
        try:
            raw = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SerializationError(
                "Message body is not valid JSON",
                payload_type="MessageEnvelope",
                cause=exc,
            ) from exc
        return MessageEnvelope.from_dict(raw)


__all__ = ["EnvelopeSerializer", "canonical_json"]
