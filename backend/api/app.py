"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import DEFAULT_JWT_SECRET, Settings, get_settings
from modules.auth.routes import router as auth_router
from modules.posts.routes import router as posts_router

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .models import ErrorResponse, ValidationErrorResponse
from .routes import health

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings: Settings = app.state.container.settings
    configure_logging(settings)
    if settings.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning(
            "JWT_SECRET is not set; using the development placeholder. "
            "Set JWT_SECRET before deploying."
        )
    logger.info(
        "Starting %s on %s:%s (storage: %s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.storage_backend,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build services from (default: get_settings())
        container: Prebuilt service container; overrides settings

    Returns:
        Configured FastAPI instance
    """
    if container is None:
        container = ServiceContainer(settings or get_settings())
    settings = container.settings

    app = FastAPI(
        title=settings.app_name,
        description="Token-authenticated blog API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(
        auth_router,
        prefix="/auth",
        tags=["auth"],
        responses={
            400: {"model": ValidationErrorResponse},
            401: {"model": ErrorResponse},
        },
    )
    app.include_router(
        posts_router,
        prefix="/posts",
        tags=["posts"],
        responses={
            400: {"model": ValidationErrorResponse},
            401: {"model": ErrorResponse},
            403: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
        },
    )

    return app


# Application instance for uvicorn
app = create_app()
