"""Application adoption – downstream events emitted for an accepted adoption.

Outbound message ids are derived from the adoption id, so emitting the same
adoption's events twice (e.g. from the reconciliation sweep) reuses the same
deduplication keys.
"""
from __future__ import annotations

import uuid
from typing import Any

from adoptflow.application.adoption.models import Adoption, AdoptionStatus
from adoptflow.application.animals import Animal
from adoptflow.kernel.messaging import AdoptionCreated, EventTypes, MessageBus, WebhookPublish

ADOPTION_COMPLETED_NOTIFICATION = "adoption.completed"

_NAMESPACE = uuid.UUID("6f1c0b2e-4a55-4d0e-9a57-3c2a9c5c1e7d")


def derived_message_id(adoption_id: str, event_type: str) -> str:
    return str(uuid.uuid5(_NAMESPACE, f"{adoption_id}:{event_type}"))


def adoption_summary(adoption: Adoption, animal: Animal | None) -> dict[str, Any]:
    return {
        "adoption_id": adoption.id,
        "animal_id": adoption.animal_id,
        "animal_name": animal.name if animal else None,
        "animal_species": animal.species if animal else None,
        "adopter_name": adoption.adopter_name,
        "adopter_email": adoption.adopter_email,
        "status": AdoptionStatus.COMPLETED.value,
        "created_at": adoption.created_at.isoformat(),
    }


async def emit_adoption_events(bus: MessageBus, adoption: Adoption, animal: Animal | None) -> None:
    """Emit ``adoption.created`` then ``webhook.publish`` for *adoption*."""
    created = AdoptionCreated(animal_id=adoption.animal_id)
    await bus.emit(
        EventTypes.ADOPTION_CREATED.value,
        created.to_payload(),
        message_id=derived_message_id(adoption.id, EventTypes.ADOPTION_CREATED.value),
    )

    webhook_id = derived_message_id(adoption.id, EventTypes.WEBHOOK_PUBLISH.value)
    notification = WebhookPublish(
        event_id=webhook_id,
        notification_type=ADOPTION_COMPLETED_NOTIFICATION,
        occurred_at=adoption.created_at.isoformat(),
        data=adoption_summary(adoption, animal),
    )
    await bus.emit(
        EventTypes.WEBHOOK_PUBLISH.value,
        notification.to_payload(),
        message_id=webhook_id,
    )


__all__ = [
    "ADOPTION_COMPLETED_NOTIFICATION",
    "adoption_summary",
    "derived_message_id",
    "emit_adoption_events",
]
