"""Configuration module."""

from health_service.config.logging_config import configure_logging
from health_service.config.settings import BuildInfo, Settings, get_build_info, get_settings

__all__ = ["BuildInfo", "Settings", "configure_logging", "get_build_info", "get_settings"]
