"""
Application factory.

Run locally with `python -m src.main` (host and port come from the settings, see src/core/config.py),
or with `uvicorn --factory src.main:create_app`.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from src.api.errors import register_exception_handlers
from src.api.routes import router as games_router
from src.core.config import Settings, get_settings
from src.core.logging_config import configure_logging
from src.core.uid import UIDGenerator, UUID4Generator
from src.db.database import build_session_factory
from src.db.memory_repository import InMemoryGameRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    uid_generator: Optional[UIDGenerator] = None,
) -> FastAPI:
    """Build the FastAPI app and wire the storage backend chosen in the settings."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting games service (storage backend: %s)", settings.STORAGE_BACKEND
        )
        yield
        logger.info("Stopping games service")

    app = FastAPI(title="Games service", lifespan=lifespan)
    app.state.settings = settings
    app.state.uid_generator = uid_generator or UUID4Generator()

    if settings.STORAGE_BACKEND == "sql":
        app.state.session_factory = build_session_factory(settings.DATABASE_URL)
    else:
        app.state.repository = InMemoryGameRepository()

    register_exception_handlers(app)
    app.include_router(games_router)
    return app


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.APP_HOST, port=settings.APP_PORT)
