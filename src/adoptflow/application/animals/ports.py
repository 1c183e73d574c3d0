"""Application animals – collaborator ports implemented by the animal service."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from adoptflow.application.animals.models import Animal


@runtime_checkable
class AnimalDirectory(Protocol):
    """Port: read-only lookup of animals."""

    async def get_animal(self, animal_id: str) -> Animal | None: ...


@runtime_checkable
class AnimalRepository(AnimalDirectory, Protocol):
    """Port: lookup plus the single permitted write, ``available → False``."""

    async def set_animal_unavailable(self, animal_id: str) -> None: ...


__all__ = ["AnimalDirectory", "AnimalRepository"]
