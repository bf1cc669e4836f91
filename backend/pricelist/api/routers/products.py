"""CRUD endpoints for the product price list."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pricelist.api.dependencies.db import get_session
from pricelist.api.schemas.product import (
    DeleteResponse,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from pricelist.core.errors import StoreError
from pricelist.services import product_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List all products",
    response_model=list[ProductRead],
)
def list_products(
    db: Session = Depends(get_session),
) -> list[ProductRead]:
    """Return every product ordered by id. No pagination or filtering."""
    try:
        products = product_service.list_products(db)
        return [ProductRead.model_validate(p) for p in products]
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products: {e}", exc_info=True)
        raise StoreError("Database error", str(e)) from e


@router.get(
    "/{product_id}",
    summary="Get a single product",
    response_model=ProductRead,
)
def get_product(
    product_id: int,
    db: Session = Depends(get_session),
) -> ProductRead:
    try:
        product = product_service.get_product(db, product_id)
        return ProductRead.model_validate(product)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching product {product_id}: {e}", exc_info=True)
        raise StoreError("Database error", str(e)) from e


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
def create_product(
    payload: ProductCreate,
    db: Session = Depends(get_session),
) -> ProductRead:
    """Persist a product; the store assigns id and timestamps."""
    try:
        product = product_service.create_product(db, payload)
        return ProductRead.model_validate(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating product: {e}", exc_info=True)
        raise StoreError("Creation failed", str(e)) from e


@router.put(
    "/{product_id}",
    summary="Update an existing product",
    response_model=ProductRead,
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    db: Session = Depends(get_session),
) -> ProductRead:
    """Partial update: fields missing from the body keep their values."""
    try:
        product = product_service.update_product(db, product_id, payload)
        return ProductRead.model_validate(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
        raise StoreError("Update failed", str(e)) from e


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    response_model=DeleteResponse,
)
def delete_product(
    product_id: int,
    db: Session = Depends(get_session),
) -> DeleteResponse:
    """Hard delete a single product."""
    try:
        product_service.delete_product(db, product_id)
        return DeleteResponse(message="Product deleted successfully")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
        raise StoreError("Deletion failed", str(e)) from e
