from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from car_registry.infra.db import config

logger = logging.getLogger(__name__)

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def engine_options(url: str) -> dict[str, Any]:
    """
    Build create_engine() keyword arguments for the given URL.

    Connection Pool Configuration (server databases only):
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)

    SQLite uses its own pool classes that reject the sizing arguments.
    """
    options: dict[str, Any] = {"pool_pre_ping": True}

    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=config.pool_size(),
            max_overflow=config.max_overflow(),
            pool_recycle=config.pool_recycle(),
        )

    return options


def get_engine() -> Engine:
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        url = config.database_url()
        _engine = create_engine(url, **engine_options(url))
        logger.info(
            "Database engine created",
            extra={"backend": _engine.dialect.name},
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


def dispose_engine() -> None:
    """Close pooled connections and forget the engine and session factory."""
    global _engine, _session_local
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_local = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
