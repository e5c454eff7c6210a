"""
Production FastAPI Application

Attendee registration and ticket inventory over a single PostgreSQL database.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Registration Service] Starting up...')

    tracing = TracingConfig(service_name=settings.SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Registration Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Registration Service] Dependency injection wired')

    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)
    Logger.base.info('🗄️  [Registration Service] Database engine ready + instrumented')

    Logger.base.info('✅ [Registration Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Registration Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Registration Service] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Registration Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
