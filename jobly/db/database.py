"""
Database connection and session management
"""

from typing import Any, Dict, Generator

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from ..core.config import settings


def engine_options(database_url: str) -> Dict[str, Any]:
    """Engine keyword arguments suited to the database backend"""
    if database_url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live and die with their connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_pre_ping": True,   # Verify connections before use
        "pool_recycle": 300,     # Recycle connections every 5 minutes
    }


# Create database engine
engine = create_engine(
    settings.database_url,
    echo=settings.debug,  # Log SQL queries in debug mode
    **engine_options(settings.database_url),
)


def create_db_and_tables():
    """Create database tables"""
    # Register table models on the metadata
    from ..models import company, job  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """Get database session for dependency injection"""
    with Session(engine) as session:
        yield session
