"""SQLAlchemy adapter – ORM tables for the idempotency ledger and dead letters."""
from __future__ import annotations

import datetime

from sqlalchemy import Boolean, DateTime, Integer, LargeBinary, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ProcessedMessageModel(Base):
    """One row per claimed message id; the primary key enforces uniqueness."""

    __tablename__ = "processed_messages"

    message_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    processed_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True))


class DeadLetterModel(Base):
    __tablename__ = "dead_letters"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    message_id: Mapped[str] = mapped_column(String(255), index=True)
    event_type: Mapped[str] = mapped_column(String(128))
    payload: Mapped[bytes] = mapped_column(LargeBinary)
    reason: Mapped[str] = mapped_column(Text)
    retry_count: Mapped[int] = mapped_column(Integer, default=0)
    failed_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), index=True)
    replayed: Mapped[bool] = mapped_column(Boolean, default=False)


__all__ = ["Base", "DeadLetterModel", "ProcessedMessageModel"]
