"""Testing fakes – InMemoryAdoptionRepository."""
from __future__ import annotations

import dataclasses
from datetime import datetime

from adoptflow.application.adoption.models import Adoption, AdoptionStatus
from adoptflow.kernel.errors import NotFoundError


class InMemoryAdoptionRepository:
    """Stores copies so callers cannot mutate persisted state behind its back."""

    def __init__(self) -> None:
        self._adoptions: dict[str, Adoption] = {}

    async def persist_adoption(self, adoption: Adoption) -> None:
        self._adoptions[adoption.id] = dataclasses.replace(adoption)

    async def update_status(self, adoption_id: str, status: AdoptionStatus) -> None:
        stored = self._adoptions.get(adoption_id)
        if stored is None:
            raise NotFoundError("Adoption", adoption_id)
        stored.transition_to(status)

    async def get(self, adoption_id: str) -> Adoption | None:
        stored = self._adoptions.get(adoption_id)
        return dataclasses.replace(stored) if stored is not None else None

    async def list_pending(self, created_before: datetime) -> list[Adoption]:
        return [
            dataclasses.replace(a)
            for a in sorted(self._adoptions.values(), key=lambda a: a.created_at)
            if a.status is AdoptionStatus.PENDING and a.created_at <= created_before
        ]

    def all(self) -> list[Adoption]:
        return [dataclasses.replace(a) for a in self._adoptions.values()]


__all__ = ["InMemoryAdoptionRepository"]
