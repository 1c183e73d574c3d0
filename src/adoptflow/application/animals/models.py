"""Application animals – Animal availability projection."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Animal:
    """Read model of an animal owned by the animal service."""

    id: str
    name: str
    species: str
    available: bool = True


@dataclass(frozen=True)
class AvailabilityCheck:
    """Result of asking whether an animal can be adopted."""

    available: bool
    animal: Animal | None
    reason: str

    @property
    def found(self) -> bool:
        return self.animal is not None


__all__ = ["Animal", "AvailabilityCheck"]
