import pytest
from fastapi.testclient import TestClient

from quillquest.agents.creative import CreativeService
from quillquest.core.config import Settings
from quillquest.main import create_app
from quillquest.web.routes import get_creative_service
from quillquest.tests.fakes import FakeVenice


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(
        VENICE_API_KEY="test-key",
        VENICE_API_URL="https://venice.test",
        VENICE_TIMEOUT=5.0,
    )


@pytest.fixture(name="venice")
def venice_fixture():
    return FakeVenice()


@pytest.fixture(name="service")
def service_fixture(venice: FakeVenice):
    return CreativeService(venice)


@pytest.fixture(name="client")
def client_fixture(settings: Settings, service: CreativeService):

    app = create_app(settings)
    app.dependency_overrides[get_creative_service] = lambda: service

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
