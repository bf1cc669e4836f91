"""Simple health and readiness endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from pricelist.api.schemas.health import HealthStatus, ReadinessStatus
from pricelist.core.errors import ServiceUnavailableError
from pricelist.db.session import engine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _iso_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


@router.get("", summary="Liveness probe", response_model=HealthStatus)
async def health() -> HealthStatus:
    """Indicates the API process is running. Does not touch the database."""
    return HealthStatus(status="OK", timestamp=_iso_timestamp())


@router.get("/ready", summary="Readiness probe", response_model=ReadinessStatus)
def ready() -> ReadinessStatus:
    """Check database connectivity before routing traffic to this instance."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        raise ServiceUnavailableError("Database unavailable", str(e)) from e

    return ReadinessStatus(status="OK", database="connected")
