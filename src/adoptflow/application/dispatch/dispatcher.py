"""Application dispatch – explicit ``event_type → handler`` table.

Decides, for every delivery, whether the broker message is acknowledged or
requeued. Handlers are acknowledged once they complete, whether they
succeed, reject the message on business grounds or fail; requeue is reserved
for the exception types a route names (by default
:class:`IdempotencyStoreUnavailableError`, where no claim was committed and
redelivery is safe).
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from adoptflow.kernel.errors import (
    IdempotencyStoreUnavailableError,
    SerializationError,
    ValidationError,
)
from adoptflow.kernel.messaging import EnvelopeSerializer, MessageEnvelope
from adoptflow.observability.logging import get_logger, message_context

logger = get_logger(__name__)

type Handler = Callable[[MessageEnvelope], Awaitable[Any]]


class Disposition(str, Enum):
    ACK = "ACK"
    REQUEUE = "REQUEUE"


@dataclass(frozen=True)
class Route:
    handler: Handler
    requeue_on: tuple[type[BaseException], ...] = (IdempotencyStoreUnavailableError,)


@dataclass(frozen=True)
class DispatchResult:
    disposition: Disposition
    outcome: Any = None
    error: BaseException | None = None

    @property
    def acked(self) -> bool:
        return self.disposition is Disposition.ACK


class EventDispatcher:
    """Routes envelopes to handlers registered at startup."""

    def __init__(
        self,
        routes: Mapping[str, Route] | None = None,
        serializer: EnvelopeSerializer | None = None,
    ) -> None:
        self._routes: dict[str, Route] = dict(routes or {})
        self._serializer = serializer or EnvelopeSerializer()

    def register(
        self,
        event_type: str,
        handler: Handler,
        *,
        requeue_on: tuple[type[BaseException], ...] = (IdempotencyStoreUnavailableError,),
    ) -> None:
        if event_type in self._routes:
            raise ValueError(f"handler already registered for {event_type!r}")
        self._routes[event_type] = Route(handler=handler, requeue_on=requeue_on)

    @property
    def event_types(self) -> frozenset[str]:
        return frozenset(self._routes)

    async def dispatch_raw(self, body: bytes) -> DispatchResult:
        """Decode broker bytes and dispatch; undecodable bodies are acked and logged."""
        try:
            envelope = self._serializer.decode(body)
        except (SerializationError, ValidationError) as exc:
            logger.error("message_rejected", error=exc.message, code=exc.code)
            return DispatchResult(Disposition.ACK, error=exc)
        return await self.dispatch(envelope)

    async def dispatch(self, envelope: MessageEnvelope) -> DispatchResult:
        route = self._routes.get(envelope.event_type)
        with message_context(envelope.message_id, envelope.event_type):
            if route is None:
                logger.error("unknown_event_type")
                return DispatchResult(
                    Disposition.ACK,
                    error=ValidationError(f"unknown event type {envelope.event_type!r}"),
                )

            try:
                outcome = await route.handler(envelope)
            except ValidationError as exc:
                logger.warning("payload_rejected", error=exc.message, errors=exc.errors)
                return DispatchResult(Disposition.ACK, error=exc)
            except route.requeue_on as exc:
                logger.warning("message_requeued", error=str(exc))
                return DispatchResult(Disposition.REQUEUE, error=exc)
            except Exception as exc:  # noqa: BLE001
                # acked anyway: a poison message must not be redelivered forever
                logger.exception("handler_failed")
                return DispatchResult(Disposition.ACK, error=exc)

            return DispatchResult(Disposition.ACK, outcome=outcome)


__all__ = ["DispatchResult", "Disposition", "EventDispatcher", "Handler", "Route"]
