"""Database engine, models and startup routine."""
