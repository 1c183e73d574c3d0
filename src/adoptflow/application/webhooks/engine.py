"""Application webhooks – WebhookDeliveryEngine.

Signs a ``webhook.publish`` notification and POSTs it to the external
receiver. Failed attempts (timeout, transport error, non-2xx) are retried
sequentially inside one ``publish_event`` call with capped exponential
backoff and full jitter; when attempts run out the notification is routed to
the dead-letter destination, as is any attempt that fails for a reason
retrying cannot fix. The broker is only asked to redeliver when the
idempotency store is down and no claim was made.

Consumed messages run under :class:`IdempotencyGuard`, keyed on the inbound
``message_id``: a redelivered or reconciler re-emitted ``webhook.publish``
never reaches the receiver twice.
"""
from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import tenacity

from adoptflow.application.idempotency import IdempotencyGuard
from adoptflow.application.webhooks.models import DeliveryStatus, WebhookDeliveryAttempt
from adoptflow.application.webhooks.signature import (
    EVENT_ID_HEADER,
    EVENT_TYPE_HEADER,
    SIGNATURE_HEADER,
    WebhookSigner,
)
from adoptflow.config import PipelineSettings
from adoptflow.kernel.errors import WebhookDeliveryError
from adoptflow.kernel.messaging import (
    DeadLetterEntry,
    DeadLetterSink,
    EventTypes,
    MessageEnvelope,
    WebhookPublish,
    canonical_json,
)
from adoptflow.observability.logging import get_logger, message_context
from adoptflow.resilience.retry import (
    BackoffStrategy,
    ExponentialBackoff,
    FullJitter,
    JitterStrategy,
    StrategyWait,
)

logger = get_logger(__name__)

USER_AGENT = "adoptflow-webhooks/1.0"


class WebhookDeliveryEngine:
    """Delivers signed notifications with bounded retries and dead-lettering.

    Use as an async context manager to own a pooled ``httpx.AsyncClient``;
    otherwise pass *client* explicitly, or a short-lived client is opened per
    attempt.
    """

    def __init__(
        self,
        url: str,
        secret: str,
        dead_letters: DeadLetterSink,
        *,
        max_attempts: int = 6,
        timeout: float = 5.0,
        backoff: BackoffStrategy | None = None,
        jitter: JitterStrategy | None = None,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        guard: IdempotencyGuard | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._url = url
        self._secret = secret
        self._dead_letters = dead_letters
        self._max_attempts = max_attempts
        self._timeout = timeout
        self._wait = StrategyWait(backoff or ExponentialBackoff(), jitter or FullJitter())
        self._client = client
        self._owns_client = False
        self._sleep = sleep
        self._guard = guard

    @classmethod
    def from_settings(
        cls,
        settings: PipelineSettings,
        dead_letters: DeadLetterSink,
        **kwargs: Any,
    ) -> WebhookDeliveryEngine:
        return cls(
            settings.webhook_url,
            settings.webhook_secret,
            dead_letters,
            max_attempts=settings.webhook_max_attempts,
            timeout=settings.webhook_timeout_seconds,
            backoff=ExponentialBackoff(
                settings.webhook_backoff_base_seconds,
                settings.webhook_backoff_cap_seconds,
            ),
            **kwargs,
        )

    async def __aenter__(self) -> WebhookDeliveryEngine:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, *_: Any) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def handle(self, envelope: MessageEnvelope) -> WebhookDeliveryAttempt | None:
        """Deliver a consumed ``webhook.publish``; ``None`` for a suppressed duplicate."""
        event = WebhookPublish.from_payload(envelope.payload)
        with message_context(envelope.message_id, envelope.event_type, webhook_event_id=event.event_id):
            if self._guard is None:
                return await self.publish_event(event)
            return await self._guard.run(envelope.message_id, lambda: self.publish_event(event))

    async def publish_event(self, event: WebhookPublish) -> WebhookDeliveryAttempt:
        body = canonical_json(event.to_payload())
        signature = WebhookSigner.sign(body, self._secret)
        headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            SIGNATURE_HEADER: signature,
            EVENT_ID_HEADER: event.event_id,
            EVENT_TYPE_HEADER: event.notification_type,
        }
        attempt = WebhookDeliveryAttempt(event_id=event.event_id, signature=signature)

        retrying = tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_exception_type(WebhookDeliveryError),
            sleep=self._sleep,
            before_sleep=self._log_retry,
            reraise=False,
        )
        try:
            async for trial in retrying:
                with trial:
                    attempt.attempt_count = trial.retry_state.attempt_number
                    await self._post(body, headers, attempt)
        except tenacity.RetryError:
            await self._dead_letter(event, body, attempt)
            return attempt
        except Exception as exc:  # noqa: BLE001
            # not retryable, but a notification is never dropped without a record
            attempt.http_status = None
            attempt.last_error = f"{type(exc).__name__}: {exc}"
            logger.exception("webhook_attempt_aborted", event_id=event.event_id)
            await self._dead_letter(event, body, attempt)
            return attempt

        attempt.status = DeliveryStatus.DELIVERED
        logger.info(
            "webhook_delivered",
            event_id=event.event_id,
            attempts=attempt.attempt_count,
            http_status=attempt.http_status,
        )
        return attempt

    async def _post(self, body: bytes, headers: dict[str, str], attempt: WebhookDeliveryAttempt) -> None:
        try:
            if self._client is not None:
                response = await self._client.post(
                    self._url, content=body, headers=headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self._url, content=body, headers=headers)
        except httpx.TimeoutException as exc:
            attempt.http_status = None
            attempt.last_error = f"timeout after {self._timeout}s"
            raise WebhookDeliveryError(self._url, attempt.last_error, cause=exc) from exc
        except httpx.HTTPError as exc:
            attempt.http_status = None
            attempt.last_error = f"{type(exc).__name__}: {exc}"
            raise WebhookDeliveryError(self._url, attempt.last_error, cause=exc) from exc

        attempt.http_status = response.status_code
        if not response.is_success:
            attempt.last_error = f"HTTP {response.status_code}"
            raise WebhookDeliveryError(
                self._url, attempt.last_error, status_code=response.status_code
            )
        attempt.last_error = None

    async def _dead_letter(
        self, event: WebhookPublish, body: bytes, attempt: WebhookDeliveryAttempt
    ) -> None:
        entry = DeadLetterEntry(
            message_id=event.event_id,
            event_type=EventTypes.WEBHOOK_PUBLISH.value,
            payload=body,
            reason=attempt.last_error or "delivery attempts exhausted",
            retry_count=attempt.attempt_count,
        )
        await self._dead_letters.push(entry)
        attempt.status = DeliveryStatus.DEAD_LETTERED
        attempt.dead_letter_id = entry.id
        logger.error(
            "webhook_dead_lettered",
            event_id=event.event_id,
            attempts=attempt.attempt_count,
            reason=entry.reason,
            dead_letter_id=entry.id,
        )

    @staticmethod
    def _log_retry(retry_state: tenacity.RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "webhook_attempt_failed",
            attempt=retry_state.attempt_number,
            next_delay=round(retry_state.upcoming_sleep, 3),
            error=getattr(exc, "message", str(exc)),
        )


__all__ = ["USER_AGENT", "WebhookDeliveryEngine"]
