"""FastAPI application for the workout-ai HTTP API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..agents.client import AnthropicCompletionClient, CompletionClient
from ..config import Settings, get_settings
from ..db.engine import init_db, resolve_db_path
from .routers import auth, progress, workouts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: make sure the schema exists
    await init_db(app.state.db_path)
    logger.info("Database ready at %s", app.state.db_path)
    yield


def create_app(
    settings: Settings | None = None,
    db_path: Path | None = None,
    completion_client: CompletionClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings (read from the environment if omitted)
        db_path: SQLite file to use instead of the configured DATABASE_URL
        completion_client: Completion client to use instead of Anthropic
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="workout-ai",
        description="AI-generated workout plans",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_path = db_path or resolve_db_path(settings.database_url)
    app.state.completion_client = (
        completion_client or AnthropicCompletionClient.from_settings(settings)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth.router)
    app.include_router(workouts.router)
    app.include_router(progress.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
