"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .errors import ERROR_RESPONSES, register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router
from modules.bookings.routes import router as bookings_router
from modules.dashboard.routes import router as dashboard_router
from modules.rides.routes import router as rides_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Carpool marketplace: ride search, booking and ride publishing",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

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
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"], responses=ERROR_RESPONSES)
    app.include_router(rides_router, prefix="/api/rides", tags=["rides"], responses=ERROR_RESPONSES)
    app.include_router(bookings_router, prefix="/api/bookings", tags=["bookings"], responses=ERROR_RESPONSES)
    app.include_router(dashboard_router, prefix="/api/dashboard", tags=["dashboard"], responses=ERROR_RESPONSES)

    return app


# Application instance for uvicorn
app = create_app()
