"""Application adoption – workflow orchestrator and reconciliation."""
from adoptflow.application.adoption.events import (
    ADOPTION_COMPLETED_NOTIFICATION,
    adoption_summary,
    derived_message_id,
    emit_adoption_events,
)
from adoptflow.application.adoption.models import (
    ALLOWED_TRANSITIONS,
    Adoption,
    AdoptionDecision,
    AdoptionOutcome,
    AdoptionStatus,
    InvalidTransitionError,
    WorkflowStage,
)
from adoptflow.application.adoption.orchestrator import AdoptionWorkflowOrchestrator
from adoptflow.application.adoption.ports import AdoptionRepository
from adoptflow.application.adoption.reconciliation import (
    PendingAdoptionReconciler,
    ReconciliationReport,
)

__all__ = [
    "ADOPTION_COMPLETED_NOTIFICATION",
    "ALLOWED_TRANSITIONS",
    "Adoption",
    "AdoptionDecision",
    "AdoptionOutcome",
    "AdoptionRepository",
    "AdoptionStatus",
    "AdoptionWorkflowOrchestrator",
    "InvalidTransitionError",
    "PendingAdoptionReconciler",
    "ReconciliationReport",
    "WorkflowStage",
    "adoption_summary",
    "derived_message_id",
    "emit_adoption_events",
]
