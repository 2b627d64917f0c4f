import pytest
from fastapi.testclient import TestClient

from employee_registry_api.app.core.config import Settings
from employee_registry_api.app.main import create_app


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registry(app):
    return app.state.registry
