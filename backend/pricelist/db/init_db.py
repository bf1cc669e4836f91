"""Startup routine: connect, sync schema, seed demo rows."""

from __future__ import annotations

from decimal import Decimal
import logging

from sqlalchemy import func, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from pricelist.core.config import Settings
from pricelist.db.base import Base
from pricelist.db.models.product import Product

logger = logging.getLogger(__name__)

SEED_PRODUCTS: list[dict] = [
    {
        "article_no": "ART-1001",
        "product_name": "Premium Screwdriver Set",
        "in_price": Decimal("15.99"),
        "price": Decimal("29.99"),
        "unit": "set",
        "in_stock": 150,
        "description": "12-piece professional set",
    },
    {
        "article_no": "ART-1002",
        "product_name": "Wireless Mouse",
        "in_price": Decimal("8.50"),
        "price": Decimal("19.99"),
        "unit": "pcs",
        "in_stock": 200,
        "description": "Ergonomic wireless mouse",
    },
]


def check_connection(engine: Engine) -> None:
    """Open a connection and run a trivial query; raises on failure."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1")).fetchone()
    logger.info("Database connection established")


def sync_schema(engine: Engine, reset: bool = False) -> None:
    """Create all tables, dropping them first when reset is requested."""
    if reset:
        logger.warning("Dropping and recreating all tables")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Database synchronized")


def seed_products(db: Session) -> int:
    """Insert the demo products when the table is empty.

    Returns the number of rows inserted (0 if the table already had data).
    """
    existing = db.scalar(select(func.count(Product.id))) or 0
    if existing:
        logger.info(f"Skipping seed, products table already has {existing} rows")
        return 0

    db.add_all([Product(**row) for row in SEED_PRODUCTS])
    db.commit()
    logger.info(f"Seeded {len(SEED_PRODUCTS)} products")
    return len(SEED_PRODUCTS)


def init_db(engine: Engine, settings: Settings) -> None:
    """Run the startup steps in order: connect, sync schema, seed.

    Connection and schema errors propagate so the process fails to start.
    Seeding errors are logged and do not abort startup.
    """
    check_connection(engine)
    sync_schema(engine, reset=not settings.is_production)

    if settings.is_production:
        return

    db = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        seed_products(db)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error seeding database: {e}", exc_info=True)
    finally:
        db.close()
