"""
Database engine, session factory and declarative base
"""
import sqlite3

import structlog
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from storefront.config import settings

logger = structlog.get_logger(__name__)

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autoflush=False, bind=engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db():
    """Dependency that yields a database session and always closes it"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@retry(
    stop=stop_after_attempt(settings.DB_CONNECT_RETRIES),
    wait=wait_exponential(multiplier=settings.DB_CONNECT_RETRY_DELAY, min=1, max=10),
    retry=retry_if_exception_type(OperationalError),
    reraise=True
)
def init_db(bind: Engine = engine) -> None:
    """
    Create all tables

    Retries while the database is still coming up.
    """
    # Register every model on Base.metadata
    import storefront.models  # noqa: F401

    logger.info("database.init", url=bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)
