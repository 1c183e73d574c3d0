"""SQLAlchemy adapter – durable idempotency ledger and dead-letter table."""
from adoptflow.adapters.sqlalchemy.dead_letter import SqlAlchemyDeadLetterStore
from adoptflow.adapters.sqlalchemy.idempotency import SqlAlchemyIdempotencyStore
from adoptflow.adapters.sqlalchemy.models import Base, DeadLetterModel, ProcessedMessageModel
from adoptflow.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "Base",
    "DeadLetterModel",
    "ProcessedMessageModel",
    "SqlAlchemyDeadLetterStore",
    "SqlAlchemyIdempotencyStore",
    "SqlAlchemySessionFactory",
]
