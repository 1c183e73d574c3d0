"""Application dispatch – the pipeline's dispatch table, built once at startup."""
from __future__ import annotations

from adoptflow.application.adoption import AdoptionWorkflowOrchestrator
from adoptflow.application.animals import AnimalAvailabilityConsumer
from adoptflow.application.dispatch.dispatcher import EventDispatcher
from adoptflow.application.webhooks import WebhookDeliveryEngine
from adoptflow.kernel.messaging import EventTypes


def build_dispatch_table(
    orchestrator: AdoptionWorkflowOrchestrator | None = None,
    animal_consumer: AnimalAvailabilityConsumer | None = None,
    webhook_engine: WebhookDeliveryEngine | None = None,
) -> EventDispatcher:
    """Wire whichever consumers this process hosts.

    Each consumer group normally runs in its own process, so every argument
    is optional.
    """
    dispatcher = EventDispatcher()
    if orchestrator is not None:
        dispatcher.register(EventTypes.ADOPTION_REQUEST.value, orchestrator.handle_adoption_request)
    if animal_consumer is not None:
        dispatcher.register(EventTypes.ADOPTION_CREATED.value, animal_consumer.handle)
    if webhook_engine is not None:
        dispatcher.register(EventTypes.WEBHOOK_PUBLISH.value, webhook_engine.handle)
    return dispatcher


__all__ = ["build_dispatch_table"]
