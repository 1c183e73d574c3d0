"""Domain errors – rejected payloads, unknown adoptions and invalid state changes.

None of these is worth retrying: the dispatcher acks a message whose handler
raised one, and only logs it.
"""

from __future__ import annotations

from typing import Any

from adoptflow.kernel.errors.base import BaseError


class DomainError(BaseError):
    """An adoption or animal rule rejected the operation."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A message envelope or event payload failed schema validation.

    ``errors`` holds one ``{"field": ..., "error": ...}`` entry per failed
    field, e.g. ``{"field": "adopter_email", "error": "invalid_format"}``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """An adoption, animal or dead-letter entry with that id does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The change conflicts with the stored state, e.g. an invalid adoption transition."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
