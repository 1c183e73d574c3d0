"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    │       └── InvalidTransitionError  (application.adoption)
    └── InfrastructureError  (infrastructure.py)
        ├── IdempotencyStoreUnavailableError
        ├── SerializationError
        └── ExternalServiceError
            └── WebhookDeliveryError
"""

from adoptflow.kernel.errors.base import BaseError
from adoptflow.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from adoptflow.kernel.errors.infrastructure import (
    ExternalServiceError,
    IdempotencyStoreUnavailableError,
    InfrastructureError,
    SerializationError,
    WebhookDeliveryError,
)

__all__ = [
    "BaseError",
    "ConflictError",
    "DomainError",
    "ExternalServiceError",
    "IdempotencyStoreUnavailableError",
    "InfrastructureError",
    "NotFoundError",
    "SerializationError",
    "ValidationError",
    "WebhookDeliveryError",
]
