"""Unit tests for check_availability and AnimalAvailabilityConsumer."""

from __future__ import annotations

import asyncio

import pytest

from adoptflow.application.animals import (
    REASON_ALREADY_ADOPTED,
    REASON_NOT_FOUND,
    Animal,
    AnimalAvailabilityConsumer,
    AnimalRepository,
    AvailabilityOutcome,
    check_availability,
)
from adoptflow.kernel.errors import ValidationError
from adoptflow.kernel.messaging import EventTypes, MessageEnvelope
from adoptflow.testing.fakes import InMemoryAnimalRepository


def _created(animal_id: str, message_id: str = "m-1") -> MessageEnvelope:
    return MessageEnvelope(EventTypes.ADOPTION_CREATED.value, {"animal_id": animal_id}, message_id)


# ---------------------------------------------------------------------------
# check_availability
# ---------------------------------------------------------------------------


class TestCheckAvailability:
    def test_available(self) -> None:
        repo = InMemoryAnimalRepository([Animal("cat-1", "Tom", "cat")])
        check = asyncio.run(check_availability(repo, "cat-1"))
        assert check.available
        assert check.found
        assert check.animal is not None and check.animal.name == "Tom"

    def test_not_found(self) -> None:
        check = asyncio.run(check_availability(InMemoryAnimalRepository(), "cat-1"))
        assert not check.available
        assert not check.found
        assert check.reason == REASON_NOT_FOUND

    def test_already_adopted(self) -> None:
        repo = InMemoryAnimalRepository([Animal("cat-1", "Tom", "cat", available=False)])
        check = asyncio.run(check_availability(repo, "cat-1"))
        assert not check.available
        assert check.found
        assert check.reason == f"{REASON_ALREADY_ADOPTED}: Tom"

    def test_fake_satisfies_port(self) -> None:
        assert isinstance(InMemoryAnimalRepository(), AnimalRepository)


# ---------------------------------------------------------------------------
# AnimalAvailabilityConsumer
# ---------------------------------------------------------------------------


class TestAnimalAvailabilityConsumer:
    def test_marks_available_animal_unavailable(self) -> None:
        async def run() -> None:
            repo = InMemoryAnimalRepository([Animal("dog-1", "Rex", "dog")])
            outcome = await AnimalAvailabilityConsumer(repo).handle(_created("dog-1"))
            assert outcome is AvailabilityOutcome.MARKED_UNAVAILABLE
            animal = await repo.get_animal("dog-1")
            assert animal is not None and animal.available is False

        asyncio.run(run())

    @pytest.mark.parametrize("repeats", [2, 5])
    def test_repeated_events_are_harmless(self, repeats: int) -> None:
        async def run() -> None:
            repo = InMemoryAnimalRepository([Animal("dog-1", "Rex", "dog")])
            consumer = AnimalAvailabilityConsumer(repo)
            outcomes = [await consumer.handle(_created("dog-1", f"m-{i}")) for i in range(repeats)]
            assert outcomes[0] is AvailabilityOutcome.MARKED_UNAVAILABLE
            assert set(outcomes[1:]) == {AvailabilityOutcome.ALREADY_UNAVAILABLE}
            assert repo.unavailable_calls == ["dog-1"]
            animal = await repo.get_animal("dog-1")
            assert animal is not None and animal.available is False

        asyncio.run(run())

    def test_missing_animal_is_not_an_error(self) -> None:
        async def run() -> None:
            repo = InMemoryAnimalRepository()
            outcome = await AnimalAvailabilityConsumer(repo).handle(_created("ghost"))
            assert outcome is AvailabilityOutcome.NOT_FOUND
            assert repo.unavailable_calls == []

        asyncio.run(run())

    def test_malformed_payload_raises_validation_error(self) -> None:
        async def run() -> None:
            consumer = AnimalAvailabilityConsumer(InMemoryAnimalRepository())
            with pytest.raises(ValidationError):
                await consumer.handle(MessageEnvelope(EventTypes.ADOPTION_CREATED.value, {}, "m-1"))

        asyncio.run(run())
