"""FastAPI application initialization and configuration."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from health_service import __version__
from health_service.config.logging_config import configure_logging
from health_service.config.settings import get_settings

# Import routers
from health_service.api.routes import health_router, root_router

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs each handled request at debug level."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        logger.debug(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI app.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    logger.info("Starting up health service...", host=settings.api_host, port=settings.api_port)

    yield

    logger.info("Health service shutdown complete")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level, debug_mode=settings.debug)

    app = FastAPI(
        title="Health Service",
        description="Liveness and build version reporting",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Include routers
    app.include_router(root_router)
    app.include_router(health_router)

    logger.info("FastAPI app created")

    return app


# Create app instance
app = create_app()
