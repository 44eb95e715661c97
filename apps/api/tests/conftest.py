"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from usercore.config import CoreConfig
from usercore.services.user_service import UserService
from usercore.wiring import build_user_service

from user_api.main import app
from user_api.services import get_user_service


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")


@pytest.fixture
def user_service() -> UserService:
    """Fresh service with an empty store and an instant notifier."""
    return build_user_service(CoreConfig(notifier_delay_seconds=0, notifier_failure_rate=0.0))


@pytest.fixture
def client(user_service: UserService) -> Iterator[TestClient]:
    """Create a FastAPI test client bound to ``user_service``."""
    app.dependency_overrides[get_user_service] = lambda: user_service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
