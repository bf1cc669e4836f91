"""FastAPI application bootstrap: lifespan, CORS and router wiring."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricelist.api.routers import health, products
from pricelist.core.config import get_settings
from pricelist.core.errors import register_exception_handlers
from pricelist.core.logging_config import configure_logging
from pricelist.db.init_db import init_db
from pricelist.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect, sync schema and seed before serving; dispose the pool after.

    Any exception raised before the yield aborts startup, which makes
    uvicorn exit with a non-zero status.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} (environment={settings.environment})")
    init_db(engine, settings)
    try:
        yield
    finally:
        logger.info("Shutting down, closing database connections")
        engine.dispose()


def create_app() -> FastAPI:
    """Instantiate the FastAPI app and include top-level routers."""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    cors_origins = settings.cors_origins
    logger.info(f"[CORS] Allowed origins: {cors_origins}")

    # "*" means echo back whatever Origin the caller sent
    if cors_origins == ["*"]:
        origin_kwargs = {"allow_origin_regex": ".*"}
    else:
        origin_kwargs = {"allow_origins": cors_origins}
    app.add_middleware(
        CORSMiddleware,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        **origin_kwargs,
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(products.router, prefix="/api/products", tags=["products"])

    return app


app = create_app()
