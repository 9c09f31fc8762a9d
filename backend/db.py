"""
Database setup for the catalog backend.
Provides SQLAlchemy engine/session utilities for SQLite.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from settings import settings


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections get foreign keys switched on."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # check_same_thread=False allows usage across worker threads
        connect_args["check_same_thread"] = False
    new_engine = create_engine(database_url, echo=echo, connect_args=connect_args)

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def init_db(bind: Engine | None = None) -> None:
    """Create tables if they don't exist."""
    from repositories import models  # noqa: F401  Ensures models are registered

    Base.metadata.create_all(bind=bind or engine)
