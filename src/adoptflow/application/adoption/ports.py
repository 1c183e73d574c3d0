"""Application adoption – persistence port implemented by the adoption service."""
from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from adoptflow.application.adoption.models import Adoption, AdoptionStatus


@runtime_checkable
class AdoptionRepository(Protocol):
    """Port: durable storage of adoption records."""

    async def persist_adoption(self, adoption: Adoption) -> None: ...
    async def update_status(self, adoption_id: str, status: AdoptionStatus) -> None: ...
    async def get(self, adoption_id: str) -> Adoption | None: ...
    async def list_pending(self, created_before: datetime) -> list[Adoption]: ...


__all__ = ["AdoptionRepository"]
