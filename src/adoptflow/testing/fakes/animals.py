"""Testing fakes – InMemoryAnimalRepository."""
from __future__ import annotations

import dataclasses

from adoptflow.application.animals.models import Animal


class InMemoryAnimalRepository:
    """Dict-backed stand-in for the animal service."""

    def __init__(self, animals: list[Animal] | None = None) -> None:
        self._animals: dict[str, Animal] = {a.id: a for a in animals or ()}
        self.unavailable_calls: list[str] = []

    def add(self, animal: Animal) -> None:
        self._animals[animal.id] = animal

    async def get_animal(self, animal_id: str) -> Animal | None:
        return self._animals.get(animal_id)

    async def set_animal_unavailable(self, animal_id: str) -> None:
        self.unavailable_calls.append(animal_id)
        animal = self._animals.get(animal_id)
        if animal is not None:
            self._animals[animal_id] = dataclasses.replace(animal, available=False)

    def remove(self, animal_id: str) -> None:
        self._animals.pop(animal_id, None)


__all__ = ["InMemoryAnimalRepository"]
