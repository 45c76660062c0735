"""
FastAPI Application
===================

Main FastAPI app setup with routes, middleware and the store lifecycle.
Startup: connect MongoDB (fatal on failure) → ensure indexes → serve.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from users_api.api.v1 import user_router
from users_api.core.config import Settings, get_settings
from users_api.core.errors import register_exception_handlers
from users_api.core.logging import configure_logging
from users_api.di.base_container import BaseContainer
from users_api.di.container import get_container
from users_api.di.providers import MONGO_CONNECTION
from users_api.domain.exceptions import StoreUnavailableError, UserStoreError
from users_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


async def start_store(container: BaseContainer) -> None:
    """
    Connect the persistence handle and prepare the collection.

    The server is useless without its store, so any failure here ends the
    process with exit status 1.
    """
    connection = container.get(MONGO_CONNECTION)
    try:
        await connection.connect()
        await container.get(UserRepository).ensure_indexes()
    except (StoreUnavailableError, UserStoreError) as e:
        logger.critical("MongoDB startup failed, exiting: %s", e)
        raise SystemExit(1) from e


async def stop_store(container: BaseContainer) -> None:
    await container.get(MONGO_CONNECTION).close()


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware allowing any origin
    - JSON error bodies for every failure
    - User routes under /api/users
    - Lifespan hooks connecting and closing MongoDB

    Args:
        settings: Settings to use; read from the environment when omitted
        container: DI container; the global one when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    container = container or get_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        await start_store(container)
        try:
            yield
        finally:
            await stop_store(container)

    application = FastAPI(
        title="Users API",
        description="Minimal JSON API over a MongoDB users collection",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(user_router, prefix="/api/users")

    @application.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        """Diagnostic endpoint; never touches the store."""
        return "API is running..."

    @application.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        connected = container.get(MONGO_CONNECTION).is_connected
        return {
            "status": "healthy",
            "database": "connected" if connected else "disconnected",
        }

    return application
