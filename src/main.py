"""
Production FastAPI Application

Loads the saved reservation state on startup and writes it back on shutdown.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Reservation Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Reservation Service] Dependency injection wired')

    # Restore passengers, trips, bookings and waitlists
    summary = container.load_state_use_case().execute()
    Logger.base.info(
        f'📂 [Reservation Service] State restored: {summary.trips} trips, '
        f'{summary.bookings} bookings, {summary.waitlist} waiting'
    )

    Logger.base.info('✅ [Reservation Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Reservation Service] Shutting down...')

    try:
        container.state_persister().execute()
        Logger.base.info('💾 [Reservation Service] State saved')
    except OSError as e:
        Logger.base.error(f'❌ [Reservation Service] Failed to save state: {e}')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Reservation Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Bus Reservation System - seat booking, cancellation and FIFO waitlists',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    uvicorn.run('src.main:app', host='0.0.0.0', port=8000)
