"""Application adoption – PendingAdoptionReconciler.

Closes the partial-completion window: an adoption persisted as ``PENDING``
whose events were never emitted (crash between persist and emit). The sweep
re-emits the events under the same derived message ids. If the first emission
did get through, the duplicates are harmless: the animal flag is monotone and
the webhook engine suppresses the repeated message id.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from adoptflow.application.adoption.events import emit_adoption_events
from adoptflow.application.adoption.models import AdoptionStatus
from adoptflow.application.adoption.ports import AdoptionRepository
from adoptflow.application.animals import AnimalDirectory
from adoptflow.config import PipelineSettings
from adoptflow.kernel.messaging import MessageBus
from adoptflow.kernel.time import Clock, SystemClock
from adoptflow.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ReconciliationReport:
    completed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)


class PendingAdoptionReconciler:
    """Re-emit events for adoptions stuck in ``PENDING`` longer than *threshold*."""

    def __init__(
        self,
        adoptions: AdoptionRepository,
        animals: AnimalDirectory,
        bus: MessageBus,
        threshold: timedelta = timedelta(minutes=5),
        clock: Clock | None = None,
    ) -> None:
        self._adoptions = adoptions
        self._animals = animals
        self._bus = bus
        self._threshold = threshold
        self._clock = clock or SystemClock()

    @classmethod
    def from_settings(
        cls,
        settings: PipelineSettings,
        adoptions: AdoptionRepository,
        animals: AnimalDirectory,
        bus: MessageBus,
        clock: Clock | None = None,
    ) -> PendingAdoptionReconciler:
        return cls(
            adoptions,
            animals,
            bus,
            threshold=timedelta(seconds=settings.reconciliation_threshold_seconds),
            clock=clock,
        )

    async def sweep(self) -> ReconciliationReport:
        report = ReconciliationReport()
        cutoff = self._clock.now() - self._threshold
        for adoption in await self._adoptions.list_pending(cutoff):
            animal = await self._animals.get_animal(adoption.animal_id)
            if animal is None:
                adoption.transition_to(AdoptionStatus.FAILED)
                await self._adoptions.update_status(adoption.id, AdoptionStatus.FAILED)
                logger.warning("pending_adoption_failed", adoption_id=adoption.id, reason="animal not found")
                report.failed.append(adoption.id)
                continue

            try:
                await emit_adoption_events(self._bus, adoption, animal)
            except Exception as exc:  # noqa: BLE001
                # stays PENDING; the next sweep picks it up again
                logger.exception("pending_adoption_reemit_failed", adoption_id=adoption.id)
                report.errors[adoption.id] = str(exc)
                continue

            adoption.transition_to(AdoptionStatus.COMPLETED)
            await self._adoptions.update_status(adoption.id, AdoptionStatus.COMPLETED)
            logger.info("pending_adoption_reconciled", adoption_id=adoption.id)
            report.completed.append(adoption.id)

        return report


__all__ = ["PendingAdoptionReconciler", "ReconciliationReport"]
