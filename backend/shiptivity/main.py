"""Shiptivity API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShiptivityError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event; shutdown replaces explicit SIGINT/SIGTERM close hooks
    - Tables auto-created and seeded only when settings allow it; Alembic owns
      schema changes for managed databases
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shiptivity.api.error_handlers import register_error_handlers
from shiptivity.api.routes import clients, health
from shiptivity.config import get_settings
from shiptivity.db.seed import seed_clients
from shiptivity.infrastructure.database import close_db, init_db
from shiptivity.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_all()
    if settings.seed_on_startup:
        async with manager.session() as db:
            await seed_clients(db)
    logger.info("Shiptivity API started")
    yield
    logger.info("Shiptivity API shutting down")
    await close_db()


app = FastAPI(
    title="Shiptivity API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(clients.router)

register_error_handlers(app)


@app.get("/")
async def root():
    return {"message": "SHIPTIVITY API. Read documentation to see API docs"}
