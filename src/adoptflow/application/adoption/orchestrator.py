"""Application adoption – AdoptionWorkflowOrchestrator.

Stages of one ``adoption.request``::

    RECEIVED → VALID | REJECTED
    VALID → PENDING (persisted) → COMPLETED (events emitted)
    REJECTED is terminal: nothing persisted, nothing emitted.

The whole sequence runs under :class:`IdempotencyGuard`, keyed on the
inbound ``message_id``. Persist and emit are not one transaction: a crash in
between leaves the adoption ``PENDING`` with no events, which
:class:`~adoptflow.application.adoption.reconciliation.PendingAdoptionReconciler`
repairs.
"""
from __future__ import annotations

from adoptflow.application.adoption.events import emit_adoption_events
from adoptflow.application.adoption.models import (
    Adoption,
    AdoptionOutcome,
    AdoptionStatus,
    WorkflowStage,
)
from adoptflow.application.adoption.ports import AdoptionRepository
from adoptflow.application.animals import AnimalDirectory, check_availability
from adoptflow.application.idempotency import IdempotencyGuard
from adoptflow.kernel.errors import ValidationError
from adoptflow.kernel.messaging import AdoptionRequested, MessageBus, MessageEnvelope
from adoptflow.kernel.time import Clock, SystemClock
from adoptflow.observability.logging import get_logger, message_context

logger = get_logger(__name__)


class AdoptionWorkflowOrchestrator:
    """Validates adoption requests, persists them and emits downstream events."""

    def __init__(
        self,
        guard: IdempotencyGuard,
        animals: AnimalDirectory,
        adoptions: AdoptionRepository,
        bus: MessageBus,
        clock: Clock | None = None,
    ) -> None:
        self._guard = guard
        self._animals = animals
        self._adoptions = adoptions
        self._bus = bus
        self._clock = clock or SystemClock()

    async def handle_adoption_request(self, envelope: MessageEnvelope) -> AdoptionOutcome | None:
        """Process *envelope* once; returns ``None`` for a suppressed duplicate."""
        with message_context(envelope.message_id, envelope.event_type):
            return await self._guard.run(envelope.message_id, lambda: self._process(envelope))

    async def _process(self, envelope: MessageEnvelope) -> AdoptionOutcome:
        logger.info("adoption_stage", stage=WorkflowStage.RECEIVED.value)
        try:
            request = AdoptionRequested.from_payload(envelope.payload)
        except ValidationError as exc:
            return self._reject(exc.message, errors=exc.errors)

        check = await check_availability(self._animals, request.animal_id)
        if not check.available:
            return self._reject(check.reason, animal_id=request.animal_id)
        logger.info("adoption_stage", stage=WorkflowStage.VALID.value, animal_id=request.animal_id)

        adoption = Adoption(
            animal_id=request.animal_id,
            adopter_name=request.adopter_name,
            adopter_email=request.adopter_email,
            created_at=self._clock.now(),
        )
        await self._adoptions.persist_adoption(adoption)
        logger.info("adoption_stage", stage=WorkflowStage.PENDING.value, adoption_id=adoption.id)

        try:
            await emit_adoption_events(self._bus, adoption, check.animal)
        except Exception:
            logger.exception("adoption_events_not_emitted", adoption_id=adoption.id)
            raise

        adoption.transition_to(AdoptionStatus.COMPLETED)
        await self._adoptions.update_status(adoption.id, AdoptionStatus.COMPLETED)
        logger.info("adoption_stage", stage=WorkflowStage.COMPLETED.value, adoption_id=adoption.id)
        return AdoptionOutcome.completed(adoption)

    def _reject(self, reason: str, **context: object) -> AdoptionOutcome:
        logger.info("adoption_stage", stage=WorkflowStage.REJECTED.value, reason=reason, **context)
        return AdoptionOutcome.rejected(reason)


__all__ = ["AdoptionWorkflowOrchestrator"]
