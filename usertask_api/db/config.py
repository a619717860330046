"""Database configuration for the UserTask API."""
from typing import Generator
import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session

from usertask_api.config import get_settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create a SQLModel engine, enabling foreign keys for SQLite."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False, pool_pre_ping=True, **kwargs)

    connect_args = kwargs.pop("connect_args", {})
    connect_args.setdefault("check_same_thread", False)
    sqlite_engine = create_engine(
        database_url, echo=False, connect_args=connect_args, **kwargs
    )

    # SQLite only honours ON DELETE CASCADE when foreign keys are switched on
    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


DATABASE_URL = get_settings().database_url

if DATABASE_URL.startswith("sqlite"):
    logger.info(f"[DB CONFIG] Using SQLite database: {DATABASE_URL}")
else:
    logger.info("[DB CONFIG] Using server database")

engine = build_engine(DATABASE_URL)


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session
