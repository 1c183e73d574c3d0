"""Testing fakes – in-memory doubles for pipeline ports."""
from adoptflow.testing.fakes.adoptions import InMemoryAdoptionRepository
from adoptflow.testing.fakes.animals import InMemoryAnimalRepository
from adoptflow.testing.fakes.dead_letter import InMemoryDeadLetterStore
from adoptflow.testing.fakes.idempotency import InMemoryIdempotencyStore
from adoptflow.testing.fakes.message_bus import InMemoryMessageBus
from adoptflow.kernel.time import FrozenClock

__all__ = [
    "FrozenClock",
    "InMemoryAdoptionRepository",
    "InMemoryAnimalRepository",
    "InMemoryDeadLetterStore",
    "InMemoryIdempotencyStore",
    "InMemoryMessageBus",
]
