"""Models API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as the JSON error envelope
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager lives on app.state for the lifetime of the app;
      created on startup, disposed on shutdown
    - Demo models inserted on every startup when seed_demo_data is on

Design Decisions:
    - create_app(settings) factory: tests build isolated apps with their own settings
    - Lifespan over @app.on_event
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import models
from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.services.seed_demo_data import seed_demo_models

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        app.state.db_manager = db_manager
        if settings.create_schema:
            await db_manager.create_schema()
        if settings.seed_demo_data:
            await seed_demo_models(db_manager)
        logger.info("Models API started")
        try:
            yield
        finally:
            logger.info("Models API shutting down")
            await db_manager.dispose()
            app.state.db_manager = None

    app = FastAPI(title="Models API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(models.router)

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
