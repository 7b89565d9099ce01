"""User App API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserAppError → 500 text/plain responses
    - CORS configured from settings (not hardcoded)
    - Database manager, repository, service and renderer are built once in the
      lifespan from the Settings passed to create_app, and stored on app.state

Design Decisions:
    - create_app(settings) factory: configuration is an explicit argument,
      so tests and deployments build apps without touching process globals
    - The user router is included once per configured prefix ("" and "/api"
      by default); the path resolver handles both shapes
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userapp.api.error_handlers import register_error_handlers
from userapp.api.renderer import Renderer
from userapp.api.routes import health, users
from userapp.config import Settings
from userapp.infrastructure.database import DatabaseSessionManager
from userapp.infrastructure.observability import setup_logging
from userapp.infrastructure.user_repository import SqlUserRepository
from userapp.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url, **settings.engine_options(),
        )
        repository = SqlUserRepository(db_manager)
        if settings.ensure_schema_on_startup:
            try:
                await repository.ensure_schema()
            except Exception:
                await db_manager.dispose()
                raise
        app.state.db_manager = db_manager
        app.state.user_service = UserService(repository)
        app.state.renderer = Renderer(settings.template_dir)
        logger.info("User API started")
        yield
        logger.info("User API shutting down")
        await db_manager.dispose()

    app = FastAPI(title="User API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    for prefix in settings.route_prefixes:
        app.include_router(users.router, prefix=prefix)

    register_error_handlers(app)
    return app


app = create_app()
