import pytest
from fastapi.testclient import TestClient

from travelai.main import app
from travelai.services.store_service import TravelStore, get_store


@pytest.fixture
def store(tmp_path):
    return TravelStore(directory=str(tmp_path), name="test-storage")


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
