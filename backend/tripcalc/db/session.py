"""
Database engine and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from tripcalc.core.config import settings
from tripcalc.db.base import Base


def _engine_options(database_url: str) -> dict:
    """Connection options for the configured backend."""
    if make_url(database_url).get_backend_name() == "sqlite":
        # Request handlers may run in a different thread than the one that connected
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **_engine_options(settings.DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all tables for the registered models."""
    # Import models so every table is registered on the metadata
    import tripcalc.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
