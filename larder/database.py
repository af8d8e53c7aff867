"""Database engine, session factory and declarative base."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from larder.config import Settings, get_settings


def engine_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for create_engine.

    SQLite gets a single-file connection usable across threads and no pool
    sizing; everything else gets a pre-pinged, bounded pool.
    """
    if settings.database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
    }


settings = get_settings()

engine = create_engine(settings.database_url, **engine_options(settings))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create any missing tables. Alembic owns the schema outside of seeding."""
    from larder import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """Close every pooled connection. Called on application shutdown."""
    engine.dispose()
