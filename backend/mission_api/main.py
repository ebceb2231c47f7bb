"""Mission Control API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApiError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager created on startup, stored on app.state, disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mission_api import __version__
from mission_api.api.error_handlers import register_error_handlers
from mission_api.api.routes import health, incidents, missions, users
from mission_api.config import get_settings
from mission_api.infrastructure.database import DatabaseSessionManager
from mission_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.create_all()
    app.state.db_manager = db_manager
    logger.info("Mission Control API started")
    yield
    logger.info("Mission Control API shutting down")
    await db_manager.dispose()
    app.state.db_manager = None


app = FastAPI(
    title="Mission Control API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(missions.router)
app.include_router(incidents.router)
app.include_router(users.router)

register_error_handlers(app)
