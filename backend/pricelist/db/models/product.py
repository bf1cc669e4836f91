"""SQLAlchemy model for product records."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Numeric, String, Text
from sqlalchemy.types import DateTime

from pricelist.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    article_no = Column(String(50), nullable=False)
    product_name = Column(String(100), nullable=False)
    in_price = Column(Numeric(10, 2), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    unit = Column(String(20))
    in_stock = Column(Integer)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} article_no={self.article_no!r}>"
