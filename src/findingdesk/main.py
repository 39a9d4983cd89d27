"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from findingdesk.config import settings
from findingdesk.db.engine import create_db_engine, create_session_factory, create_tables
from findingdesk.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    engine = create_db_engine()

    # Auto-create tables for SQLite (local dev, no migrations)
    if settings.is_sqlite:
        await create_tables(engine)
        logger.info("SQLite tables created (local mode)")

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)

    logger.info("findingdesk API started (db=%s)", "sqlite" if settings.is_sqlite else "postgresql")
    yield

    await engine.dispose()
    logger.info("findingdesk API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="findingdesk API",
        version="0.1.0",
        description="Supplier finding editor with per-save audit history.",
        lifespan=lifespan,
    )

    # CORS middleware for the supplier front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from findingdesk.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from findingdesk.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from findingdesk.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
