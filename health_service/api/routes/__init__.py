"""API routes."""

from health_service.api.routes.health import router as health_router
from health_service.api.routes.root import router as root_router

__all__ = [
    "health_router",
    "root_router",
]
