"""Request-scoped database session for the API routes."""

from collections.abc import Generator

from sqlalchemy.orm import Session

from pricelist.db.session import get_db


def get_session() -> Generator[Session, None, None]:
    """Session shared by a route and the service calls it makes."""
    yield from get_db()
