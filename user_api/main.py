"""User API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each app owns exactly one UserStore, created in create_app() and held on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store created at app construction, not in lifespan: ASGITransport test clients
      never run lifespan, and the store must exist for them too
    - Static files mounted AFTER routes so /user and /health take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from user_api import __version__
from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import Settings, get_settings
from user_api.core.user_store import UserStore
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("User API started")
    yield
    logger.info(
        f"User API shutting down ({len(app.state.user_store)} users discarded)",
    )


def create_app(
    store: UserStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI app with its own store."""
    settings = settings or get_settings()
    app = FastAPI(title="User API", version=__version__, lifespan=lifespan)
    app.state.user_store = store if store is not None else UserStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    register_error_handlers(app)
    return app


app = create_app()


def serve() -> None:
    """Run the API with uvicorn on the configured host/port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "user_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
