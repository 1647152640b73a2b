# This project was developed with assistance from AI tools.
"""Key-value persistence port and its implementations.

Every collection (departments, banks, applications, sessions) is stored as
one JSON value under one key and is always replaced wholesale. There are no
partial updates and no transactions spanning keys: the last write wins.

Two backends exist:

* ``InMemoryStore`` -- process-local, used by tests and ``memory://``.
* ``SqlStore`` -- SQLAlchemy over a single ``kv_entries`` table, durable
  across restarts (SQLite by default).

The module keeps a singleton initialised at app startup via
``init_store()``; services never read it directly and receive the store
by injection instead.
"""

import copy
import json
import logging
from typing import Any

from sqlalchemy import JSON, Column, DateTime, String, create_engine, func
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import StoreSettings

logger = logging.getLogger(__name__)

MEMORY_URL = "memory://"


def _normalize(value: Any) -> Any:
    """Round-trip a value through JSON so only plain JSON types are stored.

    Raises TypeError for values that are not JSON-serializable.
    """
    return json.loads(json.dumps(value))


class KeyValueStore:
    """Persistence port: string keys mapped to JSON-serializable values.

    ``get`` returns None for a missing key rather than raising. Stored
    values are never None themselves (``set(key, None)`` is rejected), so
    None always means "absent".
    """

    def get(self, key: str) -> Any | None:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def contains(self, key: str) -> bool:
        return self.get(key) is not None

    def dispose(self) -> None:
        """Release backend resources. Called once at app shutdown."""


class InMemoryStore(KeyValueStore):
    """Dict-backed store. Values are copied on the way in and on the way out."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: Any) -> None:
        if value is None:
            raise ValueError(f"Refusing to store None under '{key}'; use delete()")
        self._data[key] = _normalize(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class Base(DeclarativeBase):
    pass


class KVEntry(Base):
    """One persisted collection value."""

    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self):
        return f"<KVEntry(key='{self.key}')>"


class SqlStore(KeyValueStore):
    """Durable store backed by a synchronous SQLAlchemy engine.

    Route handlers are ``async def`` and call this store directly, so each
    call blocks the event loop for one short whole-value read or write.
    That is acceptable for the single-actor, one-client model this app
    serves; switch to an async engine before serving concurrent clients.
    """

    def __init__(self, url: str, *, echo: bool = False):
        engine_kwargs: dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise each checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        self._engine = create_engine(url, **engine_kwargs)
        Base.metadata.create_all(self._engine)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    def get(self, key: str) -> Any | None:
        with self._session_factory() as session:
            entry = session.get(KVEntry, key)
            if entry is None:
                return None
            return copy.deepcopy(entry.value)

    def set(self, key: str, value: Any) -> None:
        if value is None:
            raise ValueError(f"Refusing to store None under '{key}'; use delete()")
        value = _normalize(value)
        with self._session_factory.begin() as session:
            entry = session.get(KVEntry, key)
            if entry is None:
                session.add(KVEntry(key=key, value=value))
            else:
                entry.value = value

    def delete(self, key: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(KVEntry, key)
            if entry is not None:
                session.delete(entry)

    def dispose(self) -> None:
        self._engine.dispose()


def create_store(url: str, *, echo: bool = False) -> KeyValueStore:
    """Build a store for ``url`` (``memory://`` or a SQLAlchemy URL)."""
    if url == MEMORY_URL:
        return InMemoryStore()
    return SqlStore(url, echo=echo)


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: KeyValueStore | None = None


def init_store(cfg: StoreSettings) -> KeyValueStore:
    """Initialise the singleton (called once from app lifespan)."""
    global _store  # noqa: PLW0603
    _store = create_store(cfg.STORE_URL, echo=cfg.SQL_ECHO)
    logger.info("Store initialised (backend=%s)", type(_store).__name__)
    return _store


def get_store() -> KeyValueStore:
    """FastAPI dependency: return the initialised store singleton."""
    if _store is None:
        raise RuntimeError("Store not initialised -- call init_store() first")
    return _store
