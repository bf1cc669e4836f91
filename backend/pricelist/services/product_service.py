"""Product repository operations over a SQLAlchemy session."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from pricelist.api.schemas.product import ProductCreate, ProductUpdate
from pricelist.core.errors import ProductNotFoundError
from pricelist.db.models.product import Product, utcnow

logger = logging.getLogger(__name__)


def list_products(db: Session) -> list[Product]:
    """Return every product ordered by ascending id."""
    return list(db.scalars(select(Product).order_by(Product.id.asc())).all())


def get_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


def create_product(db: Session, payload: ProductCreate) -> Product:
    product = Product(**payload.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)

    logger.info(f"Created product {product.id} ({product.article_no})")
    return product


def update_product(db: Session, product_id: int, payload: ProductUpdate) -> Product:
    """Apply only the fields present in the payload and bump updated_at."""
    product = get_product(db, product_id)

    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(product, field, value)
    product.updated_at = utcnow()

    db.commit()
    db.refresh(product)

    logger.info(f"Updated product {product_id}")
    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product(db, product_id)
    db.delete(product)
    db.commit()

    logger.info(f"Deleted product {product_id}")
