"""Pricelist API: REST CRUD over the products table."""

__version__ = "0.1.0"
