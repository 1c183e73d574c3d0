"""Application webhooks – HMAC-SHA256 request signing."""
from __future__ import annotations

import hashlib
import hmac

SIGNATURE_HEADER = "X-Webhook-Signature"
EVENT_ID_HEADER = "X-Webhook-Id"
EVENT_TYPE_HEADER = "X-Webhook-Event"


class WebhookSigner:
    """Signs and verifies webhook bodies using HMAC-SHA256."""

    ALG = "sha256"

    @classmethod
    def sign(cls, payload: bytes, secret: str) -> str:
        """Return a signature string of the form ``sha256=<hexdigest>``."""
        mac = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256)
        return f"{cls.ALG}={mac.hexdigest()}"

    @classmethod
    def verify(cls, payload: bytes, secret: str, signature: str) -> bool:
        """Verify *signature* using constant-time comparison."""
        expected = cls.sign(payload, secret)
        return hmac.compare_digest(expected.encode(), signature.encode())


__all__ = ["EVENT_ID_HEADER", "EVENT_TYPE_HEADER", "SIGNATURE_HEADER", "WebhookSigner"]
