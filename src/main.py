"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engines, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Hotels Service] Starting up...')

    tracing = TracingConfig(service_name='hotels-service')
    tracing.setup()
    Logger.base.info('📊 [Hotels Service] OpenTelemetry tracing configured')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Hotels Service] Dependency injection wired')

    # All hotel queries go through the read engine
    engine = get_engine(read_only=True)
    tracing.instrument_sqlalchemy(engine=engine)
    Logger.base.info('🗄️  [Hotels Service] Database engine ready + instrumented')

    Logger.base.info('✅ [Hotels Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Hotels Service] Shutting down...')

    await dispose_engines()

    # Flush remaining spans
    tracing.shutdown()
    Logger.base.info('📊 [Hotels Service] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Hotels Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
