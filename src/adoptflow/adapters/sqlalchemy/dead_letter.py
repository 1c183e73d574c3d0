"""SQLAlchemy adapter – SqlAlchemyDeadLetterStore."""
from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from adoptflow.adapters.sqlalchemy.models import DeadLetterModel
from adoptflow.kernel.messaging import DeadLetterEntry, DeadLetterStore


def _to_entry(row: DeadLetterModel) -> DeadLetterEntry:
    return DeadLetterEntry(
        id=row.id,
        message_id=row.message_id,
        event_type=row.event_type,
        payload=row.payload,
        reason=row.reason,
        retry_count=row.retry_count,
        failed_at=row.failed_at,
        replayed=row.replayed,
    )


class SqlAlchemyDeadLetterStore(DeadLetterStore):
    """Dead letters in a table operators can query and replay from."""

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    async def push(self, entry: DeadLetterEntry) -> None:
        async with self._session_factory() as session, session.begin():
            session.add(
                DeadLetterModel(
                    id=entry.id,
                    message_id=entry.message_id,
                    event_type=entry.event_type,
                    payload=entry.payload,
                    reason=entry.reason,
                    retry_count=entry.retry_count,
                    failed_at=entry.failed_at,
                    replayed=entry.replayed,
                )
            )

    async def list(self, limit: int = 100) -> list[DeadLetterEntry]:
        async with self._session_factory() as session:
            rows = await session.scalars(
                select(DeadLetterModel)
                .where(DeadLetterModel.replayed.is_(False))
                .order_by(DeadLetterModel.failed_at)
                .limit(limit)
            )
            return [_to_entry(row) for row in rows]

    async def get(self, entry_id: str) -> DeadLetterEntry | None:
        async with self._session_factory() as session:
            row = await session.get(DeadLetterModel, entry_id)
            return _to_entry(row) if row is not None else None

    async def mark_replayed(self, entry_id: str) -> None:
        async with self._session_factory() as session, session.begin():
            await session.execute(
                update(DeadLetterModel).where(DeadLetterModel.id == entry_id).values(replayed=True)
            )


__all__ = ["SqlAlchemyDeadLetterStore"]
