"""
Database engine and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from igloo.config import settings


def _connect_args(url: str, ssl: bool) -> dict:
    if url.startswith("sqlite"):
        # sync dependencies run in a threadpool, endpoints on the event loop
        return {"check_same_thread": False}
    if ssl and url.startswith("postgresql"):
        return {"sslmode": "require"}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url, settings.database_ssl),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session for one request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create tables for all registered models."""
    # Importing the package registers every model on Base.metadata
    import igloo.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
