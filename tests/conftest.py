import pytest
from fastapi.testclient import TestClient

from report_api.core.settings import Settings
from report_api.main import create_app


SAMPLE = {
    "name": "ACME Imports",
    "describe": "Steel bolts M8",
    "reference": "BOLT-M8-50",
    "periodentrance": "120",
    "periodsale": "45",
    "stockcurrent": "75",
    "status": "Available",
    "quantity": "10",
}


def make_client(**overrides) -> TestClient:
    cfg = Settings(_env_file=None, **overrides)
    return TestClient(create_app(cfg))


@pytest.fixture
def sample():
    return dict(SAMPLE)


@pytest.fixture
def client():
    with make_client() as c:
        yield c


@pytest.fixture
def fixed_client():
    with make_client(LEGACY_CREATE_STATUS=False, ID_POLICY="sequence") as c:
        yield c


@pytest.fixture
def repository(client):
    return client.app.state.container.api_container.purchase_repository()


@pytest.fixture
def client_factory():
    return make_client
