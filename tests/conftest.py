import pytest
from fastapi.testclient import TestClient

from devtalk_api.app.core.store import PersonStore
from devtalk_api.app.main import create_app
from devtalk_api.app.services.person_service import PersonService


@pytest.fixture
def store():
    return PersonStore.seeded()


@pytest.fixture
def service(store):
    return PersonService(store)


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as client:
        client.store = store  # type: ignore[attr-defined]
        yield client
