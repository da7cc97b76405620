"""SQLAlchemy repository implementations."""

from tradedesk.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    create_session_factory,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from tradedesk.repositories.sqlalchemy.storage_repo import SqlAlchemyStorageRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "create_session_factory",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyStorageRepository",
]
