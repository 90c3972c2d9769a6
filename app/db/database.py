# /ministry-dashboard-backend/app/db/database.py

import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

# Get the database URL from the environment.
# The second argument is a default value for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ministry_dashboard.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"


def build_engine(database_url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
    """
    Creates a SQLAlchemy engine for the given URL.
    The 'check_same_thread' argument is only needed for SQLite; queries are
    offloaded to worker threads, so the connection must be usable from them.
    """
    engine_args = {"connect_args": {"check_same_thread": False}} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, echo=echo, **engine_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Each instance produced by the returned factory is one database session."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# The application-wide engine and session factory used by the API.
engine = build_engine()
SessionLocal = build_session_factory(engine)


def init_db(bind: Engine = engine) -> None:
    """Creates any missing tables. Production schemas are managed by Alembic."""
    # Importing the registry makes sure every model is attached to Base.metadata.
    from .base import Base
    Base.metadata.create_all(bind=bind)
