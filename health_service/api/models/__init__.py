"""API response models."""

from health_service.api.models.health import HealthResponse

__all__ = ["HealthResponse"]
