#!/usr/bin/env python3
"""Start the Pricelist API under uvicorn on the configured host and port."""

import sys

import uvicorn

from pricelist.core.config import get_settings


def main() -> None:
    settings = get_settings()

    # uvicorn handles SIGINT/SIGTERM: it stops accepting connections first,
    # then runs the lifespan shutdown which disposes the database engine.
    uvicorn.run(
        "pricelist.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == '__main__':
    sys.exit(main())
