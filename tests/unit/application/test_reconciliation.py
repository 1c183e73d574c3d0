"""Unit tests for PendingAdoptionReconciler."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

from adoptflow.application.adoption import (
    Adoption,
    AdoptionStatus,
    PendingAdoptionReconciler,
    derived_message_id,
)
from adoptflow.application.animals import Animal
from adoptflow.config import PipelineSettings
from adoptflow.kernel.messaging import EventTypes
from adoptflow.testing.fakes import (
    FrozenClock,
    InMemoryAdoptionRepository,
    InMemoryAnimalRepository,
    InMemoryMessageBus,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _adoption(animal_id: str = "dog-1", age: timedelta = timedelta(minutes=10)) -> Adoption:
    return Adoption(animal_id, "Ana", "ana@example.com", created_at=NOW - age)


class TestPendingAdoptionReconciler:
    def _make(
        self, bus: InMemoryMessageBus | None = None
    ) -> tuple[PendingAdoptionReconciler, InMemoryAdoptionRepository, InMemoryAnimalRepository, InMemoryMessageBus]:
        adoptions = InMemoryAdoptionRepository()
        animals = InMemoryAnimalRepository([Animal("dog-1", "Rex", "dog")])
        bus = bus or InMemoryMessageBus()
        reconciler = PendingAdoptionReconciler(
            adoptions, animals, bus, threshold=timedelta(minutes=5), clock=FrozenClock(NOW)
        )
        return reconciler, adoptions, animals, bus

    def test_stale_pending_is_reemitted_and_completed(self) -> None:
        async def run() -> None:
            reconciler, adoptions, _, bus = self._make()
            stale = _adoption()
            await adoptions.persist_adoption(stale)

            report = await reconciler.sweep()

            assert report.completed == [stale.id]
            stored = await adoptions.get(stale.id)
            assert stored is not None and stored.status is AdoptionStatus.COMPLETED
            ids = [e.message_id for e in bus.published]
            assert ids == [
                derived_message_id(stale.id, EventTypes.ADOPTION_CREATED.value),
                derived_message_id(stale.id, EventTypes.WEBHOOK_PUBLISH.value),
            ]

        asyncio.run(run())

    def test_recent_pending_is_left_alone(self) -> None:
        async def run() -> None:
            reconciler, adoptions, _, bus = self._make()
            fresh = _adoption(age=timedelta(minutes=1))
            await adoptions.persist_adoption(fresh)

            report = await reconciler.sweep()

            assert report.completed == []
            assert bus.published == []
            stored = await adoptions.get(fresh.id)
            assert stored is not None and stored.status is AdoptionStatus.PENDING

        asyncio.run(run())

    def test_missing_animal_marks_failed(self) -> None:
        async def run() -> None:
            reconciler, adoptions, _, bus = self._make()
            orphan = _adoption(animal_id="ghost")
            await adoptions.persist_adoption(orphan)

            report = await reconciler.sweep()

            assert report.failed == [orphan.id]
            stored = await adoptions.get(orphan.id)
            assert stored is not None and stored.status is AdoptionStatus.FAILED
            assert bus.published == []

        asyncio.run(run())

    def test_emit_failure_keeps_pending_for_next_sweep(self) -> None:
        async def run() -> None:
            bus = InMemoryMessageBus(fail_on={EventTypes.ADOPTION_CREATED.value})
            reconciler, adoptions, _, _ = self._make(bus)
            stale = _adoption()
            await adoptions.persist_adoption(stale)

            report = await reconciler.sweep()
            assert stale.id in report.errors
            stored = await adoptions.get(stale.id)
            assert stored is not None and stored.status is AdoptionStatus.PENDING

            bus.fail_on.clear()
            report = await reconciler.sweep()
            assert report.completed == [stale.id]

        asyncio.run(run())

    def test_completed_adoptions_are_ignored(self) -> None:
        async def run() -> None:
            reconciler, adoptions, _, bus = self._make()
            done = _adoption()
            await adoptions.persist_adoption(done)
            await adoptions.update_status(done.id, AdoptionStatus.COMPLETED)

            report = await reconciler.sweep()
            assert report.completed == [] and report.failed == []
            assert bus.published == []

        asyncio.run(run())

    def test_from_settings_uses_threshold(self) -> None:
        settings = PipelineSettings(
            webhook_url="http://hook", webhook_secret="s", reconciliation_threshold_seconds=120
        )

        async def run() -> None:
            adoptions = InMemoryAdoptionRepository()
            bus = InMemoryMessageBus()
            reconciler = PendingAdoptionReconciler.from_settings(
                settings,
                adoptions,
                InMemoryAnimalRepository([Animal("dog-1", "Rex", "dog")]),
                bus,
                clock=FrozenClock(NOW),
            )
            stale = _adoption(age=timedelta(minutes=3))
            fresh = _adoption(age=timedelta(minutes=1))
            await adoptions.persist_adoption(stale)
            await adoptions.persist_adoption(fresh)

            report = await reconciler.sweep()
            assert report.completed == [stale.id]

        asyncio.run(run())
