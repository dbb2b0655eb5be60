"""Database engine and session setup."""

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from station_timetable.adapters.cache.entities import Base

logger = logging.getLogger(__name__)


def create_database(database_url: str) -> sessionmaker[Session]:
    """Create the engine, ensure the tables exist and return a session factory.

    An in-memory SQLite URL shares one connection across threads, so that the data
    survives between sessions opened from worker threads.
    """
    engine: Engine
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        engine = create_engine(
            database_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_engine(database_url)
    Base.metadata.create_all(engine)
    logger.info(f"Using station cache database {engine.url}")
    return sessionmaker(bind=engine, expire_on_commit=False)
