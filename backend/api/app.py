"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.database import reset_client_cache
from shared.logging import setup_logging

from .dependencies import get_container, reset_container
from .exceptions import setup_exception_handlers
from .routes import health
from modules.agreements.routes import router as agreements_router
from modules.announcements.routes import router as announcements_router
from modules.apartments.routes import router as apartments_router
from modules.coupons.routes import router as coupons_router
from modules.members.routes import router as members_router
from modules.payments.routes import router as payments_router
from modules.users.routes import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the document store handle on startup and releases it on shutdown.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.debug)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    get_container().open()
    yield
    logger.info("Shutting down %s", settings.app_name)
    reset_container()
    reset_client_cache()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Apartment building management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    setup_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(users_router, tags=["users"])
    app.include_router(agreements_router, tags=["agreements"])
    app.include_router(members_router, tags=["members"])
    app.include_router(payments_router, tags=["payments"])
    app.include_router(apartments_router, tags=["apartments"])
    app.include_router(coupons_router, tags=["coupons"])
    app.include_router(announcements_router, tags=["announcements"])

    return app


# Application instance for uvicorn
app = create_app()
