"""Infrastructure errors – I/O failures, external integrations."""

from __future__ import annotations

from typing import Any

from adoptflow.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class IdempotencyStoreUnavailableError(InfrastructureError):
    """The idempotency ledger could not be reached.

    No claim was committed, so the message must be redelivered rather than
    processed or dropped.
    """

    default_code = "idempotency_store_unavailable"

    def __init__(self, message_id: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Idempotency store unavailable while registering '{message_id}'",
            **kwargs,
        )
        self.message_id = message_id


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class WebhookDeliveryError(ExternalServiceError):
    """One webhook attempt failed (timeout, transport error or non-2xx)."""

    default_code = "webhook_delivery_failed"


__all__ = [
    "ExternalServiceError",
    "IdempotencyStoreUnavailableError",
    "InfrastructureError",
    "SerializationError",
    "WebhookDeliveryError",
]
