"""Initialize database tables."""
from typing import Optional
import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from usertask_api.db.config import engine as default_engine
from usertask_api.models.task import Task  # noqa: F401  (registers the table)
from usertask_api.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables in the database."""
    target = engine or default_engine
    logger.info("[DB INIT] Creating all tables...")
    SQLModel.metadata.create_all(target)
    logger.info("[DB INIT] Tables created successfully.")


if __name__ == "__main__":
    init_db()
    print("Database tables created successfully.")
