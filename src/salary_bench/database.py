"""Database connection and session management."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session

from salary_bench.config import get_settings
from salary_bench.errors import DatabaseConnectionError
from salary_bench.models import Base

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


def get_engine(database_url: str | None = None, echo: bool | None = None) -> Engine:
    """Create database engine from explicit arguments or settings."""
    settings = get_settings()
    return create_engine(
        database_url or settings.database_url,
        echo=settings.sql_echo if echo is None else echo,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    """Create the departments, employees and salaries tables."""
    Base.metadata.create_all(bind=engine)


@contextmanager
def connection_scope(engine: Engine) -> Iterator[Connection]:
    """Open a connection, released when the block exits.

    Raises:
        DatabaseConnectionError: If the connection cannot be established
    """
    try:
        conn = engine.connect()
    except (OperationalError, InterfaceError) as e:
        raise DatabaseConnectionError(
            engine.url.render_as_string(hide_password=True), str(e.orig)
        ) from e

    logger.debug("Acquired connection to %s", engine.url.render_as_string(hide_password=True))
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("Released connection")


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """Get an ORM session bound to its own connection.

    Commits on success and rolls back on error.
    """
    with connection_scope(engine) as conn:
        with Session(bind=conn, expire_on_commit=False, autoflush=False) as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise


def check_connection(engine: Engine) -> None:
    """Verify the database answers a trivial query."""
    with connection_scope(engine) as conn:
        conn.execute(text("SELECT 1"))
