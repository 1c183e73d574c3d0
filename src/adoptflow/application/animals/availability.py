"""Application animals – availability check distinguishing missing from adopted."""
from __future__ import annotations

from adoptflow.application.animals.models import AvailabilityCheck
from adoptflow.application.animals.ports import AnimalDirectory

REASON_NOT_FOUND = "animal not found"
REASON_ALREADY_ADOPTED = "animal already adopted"


async def check_availability(directory: AnimalDirectory, animal_id: str) -> AvailabilityCheck:
    animal = await directory.get_animal(animal_id)
    if animal is None:
        return AvailabilityCheck(available=False, animal=None, reason=REASON_NOT_FOUND)
    if not animal.available:
        return AvailabilityCheck(
            available=False,
            animal=animal,
            reason=f"{REASON_ALREADY_ADOPTED}: {animal.name}",
        )
    return AvailabilityCheck(
        available=True,
        animal=animal,
        reason=f"animal available: {animal.name} ({animal.species})",
    )


__all__ = ["REASON_ALREADY_ADOPTED", "REASON_NOT_FOUND", "check_availability"]
