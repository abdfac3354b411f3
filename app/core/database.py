"""
Database engine and session management.
"""

from collections.abc import Generator

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings


def build_engine(database_url: str, echo: bool = False):
    """
    Create a SQLModel engine.

    SQLite URLs get check_same_thread disabled; in-memory SQLite shares one
    connection so every session sees the same database.
    """
    kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(database_url, **kwargs)


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


def create_db_and_tables(bind=None) -> None:
    """Create every table registered on SQLModel.metadata."""
    # Register the table models before create_all
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session() -> Generator[Session, None, None]:
    """Yield a database session for one request."""
    with Session(engine) as session:
        yield session
