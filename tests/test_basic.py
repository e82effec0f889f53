"""Basic tests for core functionality."""

import pytest


def test_imports():
    """Test that all main modules can be imported."""
    from health_service.config.settings import Settings, get_settings

    settings = get_settings()
    assert settings is not None
    assert isinstance(settings, Settings)

    from health_service.api.app import create_app

    app = create_app()
    assert app is not None

    from health_service.api.models import HealthResponse

    assert HealthResponse is not None


def test_settings_defaults(monkeypatch):
    """Test settings defaults."""
    from health_service.config.settings import Settings

    for name in ("API_HOST", "API_PORT", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 8000
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    """Test settings are read from environment variables."""
    from health_service.config.settings import Settings

    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.api_port == 9090
    assert settings.debug is True


def test_get_settings_is_cached():
    from health_service.config.settings import get_settings

    assert get_settings() is get_settings()


def test_build_info_defaults_to_dev():
    from health_service.config.settings import get_build_info

    assert get_build_info().version == "dev"


def test_build_info_treats_empty_sha_as_unset(monkeypatch):
    from health_service.config.settings import get_build_info

    monkeypatch.setenv("GIT_SHA", "")

    assert get_build_info().version == "dev"


def test_build_info_reads_environment_each_call(monkeypatch):
    from health_service.config.settings import get_build_info

    monkeypatch.setenv("GIT_SHA", "abc123")
    assert get_build_info().version == "abc123"

    monkeypatch.setenv("GIT_SHA", "def456")
    assert get_build_info().version == "def456"


def test_health_response_rejects_other_status():
    from pydantic import ValidationError

    from health_service.api.models import HealthResponse

    with pytest.raises(ValidationError):
        HealthResponse(status="healthy", version="dev")


def test_health_response_requires_version():
    from pydantic import ValidationError

    from health_service.api.models import HealthResponse

    with pytest.raises(ValidationError):
        HealthResponse(version="")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
