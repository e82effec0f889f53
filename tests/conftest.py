"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from health_service.api.app import create_app
from health_service.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without a commit hash or cached settings."""
    monkeypatch.delenv("GIT_SHA", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
