from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from taskboard.config import get_settings
from taskboard.models.base import Base

_settings = get_settings()
_connect_args = {"check_same_thread": False} if _settings.database_url.startswith("sqlite") else {}
_engine = create_engine(_settings.database_url, future=True, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=_engine, autoflush=False, autocommit=False)


def init_db() -> None:
    """Create database tables if they don't exist."""

    Base.metadata.create_all(bind=_engine)


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a DB session."""

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
