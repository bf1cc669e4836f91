"""Business operations over the database."""
