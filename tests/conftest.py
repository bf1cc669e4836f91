"""Shared fixtures: a FastAPI TestClient backed by a temporary SQLite file."""

import os
import tempfile
from pathlib import Path

import pytest

# Must be set before any pricelist module builds its settings or engine
_DB_DIR = tempfile.mkdtemp(prefix="pricelist-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'pricelist.db'}"
os.environ["NODE_ENV"] = "test"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from pricelist.db.models.product import Product  # noqa: E402
from pricelist.db.session import SessionLocal, engine  # noqa: E402
from pricelist.main import app  # noqa: E402


@pytest.fixture
def db_session():
    """A session bound to the test engine, closed after the test."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_client():
    """Client after a full startup: schema recreated and demo rows seeded."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(seeded_client):
    """Client with an empty products table."""
    with engine.begin() as conn:
        conn.execute(delete(Product))
    yield seeded_client


@pytest.fixture
def product_payload():
    return {
        "article_no": "ART-2001",
        "product_name": "Cordless Drill",
        "in_price": 45.5,
        "price": "89.99",
        "unit": "pcs",
        "in_stock": 12,
        "description": "18V cordless drill with two batteries",
    }
