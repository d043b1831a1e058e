from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from task_api.main import create_app
from task_api.registry import TaskRegistry
from task_api.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    """Default settings, independent of the environment running the tests."""
    return Settings()


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def app(settings: Settings, registry: TaskRegistry):
    return create_app(settings, registry)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
