"""Database models package."""
from pricelist.db.models.product import Product

__all__ = ["Product"]
