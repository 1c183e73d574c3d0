"""Application animals – availability projection and its consumer."""
from adoptflow.application.animals.availability import (
    REASON_ALREADY_ADOPTED,
    REASON_NOT_FOUND,
    check_availability,
)
from adoptflow.application.animals.consumer import AnimalAvailabilityConsumer, AvailabilityOutcome
from adoptflow.application.animals.models import Animal, AvailabilityCheck
from adoptflow.application.animals.ports import AnimalDirectory, AnimalRepository

__all__ = [
    "REASON_ALREADY_ADOPTED",
    "REASON_NOT_FOUND",
    "Animal",
    "AnimalAvailabilityConsumer",
    "AnimalDirectory",
    "AnimalRepository",
    "AvailabilityCheck",
    "AvailabilityOutcome",
    "check_availability",
]
