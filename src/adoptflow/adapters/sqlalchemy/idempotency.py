"""SQLAlchemy adapter – SqlAlchemyIdempotencyStore."""
from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from adoptflow.adapters.sqlalchemy.models import ProcessedMessageModel
from adoptflow.kernel.errors import IdempotencyStoreUnavailableError
from adoptflow.kernel.messaging import IdempotencyRecord, IdempotencyStore
from adoptflow.kernel.time import Clock, SystemClock


class SqlAlchemyIdempotencyStore(IdempotencyStore):
    """Relational idempotency ledger.

    ``try_register`` is a plain ``INSERT`` committed in its own transaction;
    the primary key on ``message_id`` makes the database reject every
    insert after the first, however many workers race for it.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], clock: Clock | None = None) -> None:
        self._session_factory = session_factory
        self._clock = clock or SystemClock()

    async def try_register(self, message_id: str) -> bool:
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(
                    insert(ProcessedMessageModel).values(
                        message_id=message_id,
                        processed_at=self._clock.now(),
                    )
                )
        except IntegrityError:
            return False
        except (SQLAlchemyError, OSError) as exc:
            raise IdempotencyStoreUnavailableError(message_id, cause=exc) from exc
        return True

    async def get(self, message_id: str) -> IdempotencyRecord | None:
        try:
            async with self._session_factory() as session:
                row = await session.scalar(
                    select(ProcessedMessageModel).where(ProcessedMessageModel.message_id == message_id)
                )
        except (SQLAlchemyError, OSError) as exc:
            raise IdempotencyStoreUnavailableError(message_id, cause=exc) from exc
        if row is None:
            return None
        return IdempotencyRecord(message_id=row.message_id, processed_at=row.processed_at)


__all__ = ["SqlAlchemyIdempotencyStore"]
