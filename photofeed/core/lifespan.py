"""Application lifespan: startup and shutdown.

Startup configures logging and, when TELEMETRY_ENABLED is set, tracing
with FastAPI and SQLAlchemy instrumentation. Shutdown flushes spans and
disposes the SQL engine.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from photofeed.core.config import get_settings
from photofeed.infrastructure.persistence import database
from photofeed.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging()

    tracing_on = settings.telemetry_enabled
    if tracing_on:
        from photofeed.shared.telemetry.telemetry import configure_tracing, instrument

        configure_tracing(settings)
        database.ensure_engine()
        instrument(app, database.engine)

    logger.info("%s %s started", settings.app_name, settings.app_version)
    try:
        yield
    finally:
        if tracing_on:
            from photofeed.shared.telemetry.telemetry import shutdown_tracing

            shutdown_tracing()
        await database.dispose_engine()
        logger.info("%s stopped", settings.app_name)
