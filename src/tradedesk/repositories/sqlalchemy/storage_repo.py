"""SQLAlchemy implementation of StorageRepository."""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from tradedesk.repositories.sqlalchemy.orm_models import StorageSlotORM


class SqlAlchemyStorageRepository:
    """
    SQLAlchemy-backed storage slots.

    Opens a short-lived session per call so one repository can be shared
    by request threads.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        """Return the raw value stored under key."""
        with self._session_factory() as db:
            slot = db.query(StorageSlotORM).filter(StorageSlotORM.key == key).first()
            return slot.value if slot else None

    def put(self, key: str, value: str) -> None:
        """Insert or replace the value stored under key."""
        with self._session_factory() as db:
            slot = db.query(StorageSlotORM).filter(StorageSlotORM.key == key).first()
            if slot:
                slot.value = value
            else:
                db.add(StorageSlotORM(key=key, value=value))
            db.commit()

    def delete(self, key: str) -> None:
        """Remove the slot."""
        with self._session_factory() as db:
            db.query(StorageSlotORM).filter(StorageSlotORM.key == key).delete()
            db.commit()
