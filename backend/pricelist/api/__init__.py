"""HTTP layer: routers, schemas and dependencies."""
