"""Engine and session factory configuration."""

from collections.abc import Generator
import logging
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from pricelist.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create the engine for settings.database_url.

    PostgreSQL gets a pre-pinged, recycled QueuePool with TCP keepalives.
    SQLite (local runs and tests) only needs cross-thread access, since
    a request's dependency and route body may run on different threadpool workers.
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
        )

    connect_args: dict[str, Any] = {}
    if url.get_backend_name() == "postgresql":
        connect_args = {
            "connect_timeout": 10,  # 10 second connection timeout
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        }

    return create_engine(
        url,
        echo=False,
        future=True,
        poolclass=QueuePool,
        pool_pre_ping=True,  # Test connections before using
        pool_recycle=1800,  # Recycle connections after 30 minutes
        pool_size=5,
        max_overflow=10,
        connect_args=connect_args,
    )


engine = build_engine(get_settings())
logger.info(f"Database engine configured ({engine.url.get_backend_name()})")

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request.

    Commits when the route returns and rolls back if it raised.
    """
    with SessionLocal() as db:
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
