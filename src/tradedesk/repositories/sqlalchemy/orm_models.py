"""SQLAlchemy ORM model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Text

from tradedesk.repositories.sqlalchemy.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StorageSlotORM(Base):
    """SQLAlchemy model for a named storage slot (one JSON document per key)."""

    __tablename__ = "storage_slots"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
