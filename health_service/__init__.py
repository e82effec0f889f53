"""Health check service."""

__version__ = "1.0.0"
