"""API module with FastAPI application."""

from health_service.api.app import app, create_app

__all__ = ["app", "create_app"]
