"""
Database - Key-Value Store I/O

Implements the small get/set/remove contract the app needs for surviving
reloads. Uses SQLAlchemy so the same code runs against SQLite or Postgres.

This module handles ONLY storage I/O. Encoding of library records is
handled by the persistence module.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Protocol

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core import config
from core.storage.models import Base, KeyValue


class KeyValueStore(Protocol):
    """Minimal persistent key-value contract."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """
    Process-local store. Used in tests and when no database is wanted.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


def get_engine(db_url: Optional[str] = None) -> Engine:
    """
    Get SQLAlchemy engine for the key-value store.

    Args:
        db_url: Connection string; defaults to DATABASE_URL

    Returns:
        SQLAlchemy Engine instance
    """
    url = db_url or config.get_database_url()
    if url.startswith("sqlite"):
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=False
    )


def init_db(engine: Engine) -> None:
    """
    Create the kv_store table if it does not exist.

    Safe to call multiple times.
    """
    inspector = inspect(engine)
    if KeyValue.__tablename__ not in inspector.get_table_names():
        Base.metadata.create_all(engine)


class SqlKeyValueStore:
    """
    Key-value store backed by a single SQL table.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or get_engine()
        init_db(self.engine)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def _session(self) -> Session:
        return self._session_factory()

    def get(self, key: str) -> Optional[str]:
        session = self._session()
        try:
            row = session.get(KeyValue, key)
            return row.value if row is not None else None
        finally:
            session.close()

    def set(self, key: str, value: str) -> None:
        session = self._session()
        try:
            row = session.get(KeyValue, key)
            now = datetime.now(timezone.utc)
            if row is None:
                session.add(KeyValue(key=key, value=value, updated_at=now))
            else:
                row.value = value
                row.updated_at = now
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def remove(self, key: str) -> None:
        session = self._session()
        try:
            row = session.get(KeyValue, key)
            if row is not None:
                session.delete(row)
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
