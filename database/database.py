import contextlib
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config_loader import get_config

logger = logging.getLogger(__name__)


def build_engine(url: str, pool_timeout_seconds: float = 10.0):
    """
    Create an engine for the given URL.

    SQLite (used by tests and local runs) gets a single shared connection so
    an in-memory database survives across sessions and threads.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20,
        pool_timeout=pool_timeout_seconds,
    )


def set_statement_timeout(connection, timeout_seconds) -> None:
    """Bound every statement in the current transaction (PostgreSQL only)."""
    if not timeout_seconds or connection.dialect.name != "postgresql":
        return
    connection.exec_driver_sql(f"SET LOCAL statement_timeout = {int(timeout_seconds * 1000)}")


def build_session_factory(bind, statement_timeout_seconds=None) -> sessionmaker:
    factory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)

    if statement_timeout_seconds:
        @event.listens_for(factory, "after_begin")
        def _apply_statement_timeout(session, transaction, connection):
            set_statement_timeout(connection, statement_timeout_seconds)

    return factory


_config = get_config()
engine = build_engine(_config.database.url, _config.database.pool_timeout_seconds)
SessionLocal = build_session_factory(engine, _config.database.statement_timeout_seconds)


@contextlib.contextmanager
def db_session_scope():
    """Provide a transactional scope around a series of operations."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
