"""Application animals – AnimalAvailabilityConsumer.

Reacts to ``adoption.created`` by flipping the animal's ``available`` flag
to ``False``. The flag is monotone (never flipped back), so re-applying the
transition is naturally safe and no dedup ledger is needed: a redelivered or
out-of-order event finds the animal already unavailable and becomes a no-op.
"""
from __future__ import annotations

from enum import Enum

from adoptflow.application.animals.ports import AnimalRepository
from adoptflow.kernel.messaging import AdoptionCreated, MessageEnvelope
from adoptflow.observability.logging import get_logger, message_context

logger = get_logger(__name__)


class AvailabilityOutcome(str, Enum):
    MARKED_UNAVAILABLE = "MARKED_UNAVAILABLE"
    ALREADY_UNAVAILABLE = "ALREADY_UNAVAILABLE"
    NOT_FOUND = "NOT_FOUND"


class AnimalAvailabilityConsumer:
    """Consumes ``adoption.created`` and marks the animal as adopted exactly once."""

    def __init__(self, animals: AnimalRepository) -> None:
        self._animals = animals

    async def handle(self, envelope: MessageEnvelope) -> AvailabilityOutcome:
        event = AdoptionCreated.from_payload(envelope.payload)
        with message_context(envelope.message_id, envelope.event_type):
            return await self.handle_adoption_created(event.animal_id)

    async def handle_adoption_created(self, animal_id: str) -> AvailabilityOutcome:
        animal = await self._animals.get_animal(animal_id)
        if animal is None:
            # acknowledged regardless; there is no retry path for a missing animal
            logger.warning("animal_not_found", animal_id=animal_id)
            return AvailabilityOutcome.NOT_FOUND

        if not animal.available:
            logger.info("animal_already_unavailable", animal_id=animal_id)
            return AvailabilityOutcome.ALREADY_UNAVAILABLE

        await self._animals.set_animal_unavailable(animal_id)
        logger.info("animal_marked_unavailable", animal_id=animal_id)
        return AvailabilityOutcome.MARKED_UNAVAILABLE


__all__ = ["AnimalAvailabilityConsumer", "AvailabilityOutcome"]
