"""
SQLAlchemy base configuration and session management for the LogTen Pro store.

LogTen Pro keeps its logbook in a Core Data SQLite file. We only ever
read it: the engine opens the file through SQLite's URI syntax in
read-only mode and additionally sets PRAGMA query_only, so a bug here can
never corrupt a pilot's logbook.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all LogTen Pro models."""
    pass


def create_logbook_engine(path: str, read_only: bool = True, echo: bool = False) -> Engine:
    """
    Create an engine for the Core Data store at path.

    read_only=False is only meant for building fixture stores in tests.
    """
    if not read_only:
        return create_engine(f'sqlite:///{path}', echo=echo)

    # The store lives under "Group Containers", so the path needs URI escaping
    uri = Path(path).resolve().as_uri() + '?mode=ro'
    engine = create_engine(
        'sqlite://',
        echo=echo,
        creator=lambda: sqlite3.connect(uri, uri=True, check_same_thread=False),
    )

    @event.listens_for(engine, 'connect')
    def set_sqlite_pragma(dbapi_connection, connection_record):
        """Refuse writes even if the file permissions would allow them."""
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA query_only=ON')
        cursor.close()

    logger.debug(f'Opened read-only engine for {uri}')
    return engine


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Context manager for read-only sessions.

    Usage:
        with get_session(engine) as session:
            session.scalars(select(...))

    Rolls back on error and always closes the session.
    """
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
