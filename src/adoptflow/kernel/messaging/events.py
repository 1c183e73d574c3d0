"""Kernel messaging – event types and their payload schemas.

Each event type is a tagged variant with its own schema. Payloads are
validated here, at the boundary, before any handler logic runs; malformed or
unknown payloads surface as :class:`ValidationError`.
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar

from adoptflow.kernel.errors import ValidationError
from adoptflow.kernel.messaging.message import MessageEnvelope

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# printable ASCII, no surrounding whitespace: these values travel as HTTP headers
HEADER_VALUE_PATTERN = re.compile(r"[!-~](?:[ -~]*[!-~])?")


class EventTypes(str, Enum):
    ADOPTION_REQUEST = "adoption.request"
    ADOPTION_CREATED = "adoption.created"
    WEBHOOK_PUBLISH = "webhook.publish"


def _require_mapping(payload: Any, event_type: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError(
            f"{event_type} payload must be an object",
            errors=[{"field": "payload", "error": "must_be_object"}],
        )
    return payload


def _required_strings(payload: Mapping[str, Any], names: tuple[str, ...]) -> list[dict[str, Any]]:
    errors: list[dict[str, Any]] = []
    for name in names:
        value = payload.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append({"field": name, "error": "required"})
        elif not isinstance(value, str):
            errors.append({"field": name, "error": "must_be_string"})
    return errors


def _raise_for(event_type: str, errors: list[dict[str, Any]]) -> None:
    if not errors:
        return
    missing = [e["field"] for e in errors if e["error"] == "required"]
    if missing:
        message = f"missing required fields: {', '.join(missing)}"
    else:
        message = f"invalid {event_type} payload: " + ", ".join(e["field"] for e in errors)
    raise ValidationError(message, errors=errors)


@dataclasses.dataclass(frozen=True)
class AdoptionRequested:
    """Payload of ``adoption.request``."""

    event_type: ClassVar[EventTypes] = EventTypes.ADOPTION_REQUEST

    animal_id: str
    adopter_name: str
    adopter_email: str

    @classmethod
    def from_payload(cls, payload: Any) -> AdoptionRequested:
        data = _require_mapping(payload, cls.event_type.value)
        _raise_for(
            cls.event_type.value,
            _required_strings(data, ("animal_id", "adopter_name", "adopter_email")),
        )
        email = data["adopter_email"].strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError(
                "adopter_email is not a valid email address",
                errors=[{"field": "adopter_email", "error": "invalid_format"}],
            )
        return cls(
            animal_id=data["animal_id"].strip(),
            adopter_name=data["adopter_name"].strip(),
            adopter_email=email,
        )

    def to_payload(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class AdoptionCreated:
    """Payload of ``adoption.created``."""

    event_type: ClassVar[EventTypes] = EventTypes.ADOPTION_CREATED

    animal_id: str

    @classmethod
    def from_payload(cls, payload: Any) -> AdoptionCreated:
        data = _require_mapping(payload, cls.event_type.value)
        _raise_for(cls.event_type.value, _required_strings(data, ("animal_id",)))
        return cls(animal_id=data["animal_id"].strip())

    def to_payload(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class WebhookPublish:
    """Payload of ``webhook.publish``: the notification to push to subscribers.

    ``event_id`` identifies the notification to the receiver and stays stable
    across retries and replays.
    """

    event_type: ClassVar[EventTypes] = EventTypes.WEBHOOK_PUBLISH

    event_id: str
    notification_type: str
    occurred_at: str
    data: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> WebhookPublish:
        data = _require_mapping(payload, cls.event_type.value)
        errors = _required_strings(data, ("event_id", "notification_type", "occurred_at"))
        for name in ("event_id", "notification_type"):
            value = data.get(name)
            if isinstance(value, str) and value.strip() and not HEADER_VALUE_PATTERN.fullmatch(value):
                errors.append({"field": name, "error": "not_header_safe"})
        body = data.get("data", {})
        if not isinstance(body, Mapping):
            errors.append({"field": "data", "error": "must_be_object"})
        _raise_for(cls.event_type.value, errors)
        return cls(
            event_id=data["event_id"],
            notification_type=data["notification_type"],
            occurred_at=data["occurred_at"],
            data=dict(body),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "event_id": self.event_id,
            "notification_type": self.notification_type,
            "occurred_at": self.occurred_at,
            "data": dict(self.data),
        }


type EventPayload = AdoptionRequested | AdoptionCreated | WebhookPublish

PAYLOAD_SCHEMAS: dict[str, type[AdoptionRequested] | type[AdoptionCreated] | type[WebhookPublish]] = {
    EventTypes.ADOPTION_REQUEST.value: AdoptionRequested,
    EventTypes.ADOPTION_CREATED.value: AdoptionCreated,
    EventTypes.WEBHOOK_PUBLISH.value: WebhookPublish,
}


def parse_payload(envelope: MessageEnvelope) -> EventPayload:
    """Validate *envelope*'s payload against the schema of its event type."""
    schema = PAYLOAD_SCHEMAS.get(envelope.event_type)
    if schema is None:
        raise ValidationError(
            f"unknown event type {envelope.event_type!r}",
            errors=[{"field": "event_type", "error": "unknown"}],
        )
    return schema.from_payload(envelope.payload)


__all__ = [
    "EMAIL_PATTERN",
    "HEADER_VALUE_PATTERN",
    "PAYLOAD_SCHEMAS",
    "AdoptionCreated",
    "AdoptionRequested",
    "EventPayload",
    "EventTypes",
    "WebhookPublish",
    "parse_payload",
]
