"""Application adoption – Adoption record, status transitions and outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
import uuid

from adoptflow.kernel.errors import ConflictError


class AdoptionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class WorkflowStage(str, Enum):
    """Stages an ``adoption.request`` moves through inside the orchestrator."""

    RECEIVED = "RECEIVED"
    VALID = "VALID"
    REJECTED = "REJECTED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


# COMPLETED and FAILED are terminal
ALLOWED_TRANSITIONS: dict[AdoptionStatus, frozenset[AdoptionStatus]] = {
    AdoptionStatus.PENDING: frozenset({AdoptionStatus.COMPLETED, AdoptionStatus.FAILED}),
    AdoptionStatus.COMPLETED: frozenset(),
    AdoptionStatus.FAILED: frozenset(),
}


class InvalidTransitionError(ConflictError):
    default_code = "invalid_status_transition"

    def __init__(self, from_status: AdoptionStatus, to_status: AdoptionStatus) -> None:
        super().__init__(f"cannot move adoption from {from_status.value} to {to_status.value}")
        self.from_status = from_status
        self.to_status = to_status


@dataclass
class Adoption:
    """Adoption record; only ``status`` changes after creation."""

    animal_id: str
    adopter_name: str
    adopter_email: str
    status: AdoptionStatus = AdoptionStatus.PENDING
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def transition_to(self, status: AdoptionStatus) -> None:
        if status not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(self.status, status)
        self.status = status


class AdoptionDecision(str, Enum):
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class AdoptionOutcome:
    """What the orchestrator decided for one ``adoption.request``."""

    decision: AdoptionDecision
    reason: str = ""
    adoption: Adoption | None = None

    @property
    def accepted(self) -> bool:
        return self.decision is AdoptionDecision.COMPLETED

    @classmethod
    def rejected(cls, reason: str) -> AdoptionOutcome:
        return cls(decision=AdoptionDecision.REJECTED, reason=reason)

    @classmethod
    def completed(cls, adoption: Adoption) -> AdoptionOutcome:
        return cls(decision=AdoptionDecision.COMPLETED, reason="adoption completed", adoption=adoption)


__all__ = [
    "ALLOWED_TRANSITIONS",
    "Adoption",
    "AdoptionDecision",
    "AdoptionOutcome",
    "AdoptionStatus",
    "InvalidTransitionError",
    "WorkflowStage",
]
