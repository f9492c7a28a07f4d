"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from inkwell.config import APP_VERSION, Settings
from inkwell.interface.api.routes import auth, blogs, health
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.logging import get_logger
from inkwell.util.observability import instrument_fastapi

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Used as a uvicorn factory. Logfire should be configured before calling
    this (``scripts/start_app.py`` does it; tests do it in conftest.py).

    Args:
        container: DI container to serve requests from (production if None)
        settings: Settings for middleware and static files (environment if None)

    Raises:
        ConfigurationError: If production is configured with placeholder secrets
    """
    settings = settings or Settings()
    settings.ensure_production_ready()

    app_instance = FastAPI(
        title="Inkwell API",
        description="Backend API for Inkwell - accounts, avatars and blog posts",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Single configured origin, or every origin with "*"
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors.client_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(blogs.router)

    # Uploaded files are served as-is from one flat directory
    settings.uploads.root.mkdir(parents=True, exist_ok=True)
    app_instance.mount(
        settings.uploads.public_path,
        StaticFiles(directory=settings.uploads.root),
        name="uploads",
    )

    logger.info(
        "Application created: environment=%s, uploads=%s",
        settings.environment,
        settings.uploads.root,
    )
    return app_instance
