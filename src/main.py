"""
Production FastAPI Application

Box office and marketing reports over PostgreSQL.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Box Office] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Box Office] Dependency injection wired')

    # Open the asyncpg pool for this event loop up front (fail-fast)
    row_source = container.row_source()
    await row_source.warmup()
    Logger.base.info('🏊 [Box Office] Asyncpg pool warmed up')

    Logger.base.info('✅ [Box Office] Ready to serve reports')

    yield

    Logger.base.info('🛑 [Box Office] Shutting down...')

    await row_source.close_all()
    Logger.base.info('🏊 [Box Office] Asyncpg pools closed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Box Office] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
