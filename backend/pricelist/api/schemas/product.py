"""Pydantic models describing Product payloads."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    article_no: str = Field(..., max_length=50)
    product_name: str = Field(..., max_length=100)
    in_price: Decimal = Field(..., max_digits=10, decimal_places=2)
    price: Decimal = Field(..., max_digits=10, decimal_places=2)
    unit: str | None = Field(None, max_length=20)
    in_stock: int | None = None
    description: str | None = None


class ProductCreate(ProductBase):
    """Schema for POST /api/products bodies."""


class ProductUpdate(BaseModel):
    """Partial update; only fields present in the body are applied."""

    article_no: str | None = Field(None, max_length=50)
    product_name: str | None = Field(None, max_length=100)
    in_price: Decimal | None = Field(None, max_digits=10, decimal_places=2)
    price: Decimal | None = Field(None, max_digits=10, decimal_places=2)
    unit: str | None = Field(None, max_length=20)
    in_stock: int | None = None
    description: str | None = None


class ProductRead(ProductBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeleteResponse(BaseModel):
    message: str
