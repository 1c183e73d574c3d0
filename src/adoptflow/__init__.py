"""
adoptflow – reliable event pipeline for the adoption workflow.

Import path convention::

    from adoptflow.kernel.messaging import MessageEnvelope
    from adoptflow.application.idempotency import IdempotencyGuard
    from adoptflow.application.adoption import AdoptionWorkflowOrchestrator
    from adoptflow.adapters.rabbitmq import RabbitMQMessageBus
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
