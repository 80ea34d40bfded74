"""Todo List API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoListError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan (skipped for the memory backend)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup for SQLite; server databases are migrated with alembic
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todolist.api.error_handlers import register_error_handlers
from todolist.api.routes import health, todo_items
from todolist.config import get_settings
from todolist.infrastructure.database import init_db
from todolist.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.write_lock = asyncio.Lock()

    manager = None
    if settings.storage_backend == "database":
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_url.startswith("sqlite"):
            await manager.create_tables()
    logger.info(f"Todo List API started (storage: {settings.storage_backend})")
    yield
    if manager is not None:
        await manager.dispose()
    logger.info("Todo List API shutting down")


app = FastAPI(
    title="Todo List API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(todo_items.router)

register_error_handlers(app)
