import uuid

import pytest
from fastapi.testclient import TestClient

from backend.app.config import Settings
from backend.app.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite:///{tmp_path / 'inventory-test.db'}",
        "admin_token": None,
        "duplicate_client_policy": "reject",
        "strict_days_param": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


class Tenant:
    def __init__(self, client_id: str, api_key: str, read_token: str):
        self.client_id = client_id
        self.api_key = api_key
        self.read_token = read_token

    @property
    def write_headers(self) -> dict:
        return {"X-Client-ID": self.client_id, "X-API-Key": self.api_key}

    @property
    def read_headers(self) -> dict:
        return {"X-Client-ID": self.client_id, "Authorization": f"Bearer {self.read_token}"}


def provision(client: TestClient, name: str = "tenant") -> Tenant:
    tenant = Tenant(
        client_id=f"{name}-{uuid.uuid4().hex[:8]}",
        api_key=f"key-{uuid.uuid4().hex}",
        read_token=f"read-{uuid.uuid4().hex}",
    )
    res = client.post("/admin/add-client", json={
        "clientId": tenant.client_id,
        "apiKey": tenant.api_key,
        "readToken": tenant.read_token,
    })
    assert res.status_code == 200, f"Provisioning failed: {res.text}"
    return tenant


@pytest.fixture
def tenant(client):
    return provision(client, "acme")


@pytest.fixture
def other_tenant(client):
    return provision(client, "globex")


@pytest.fixture
def make_tenant(client):
    return lambda name="tenant": provision(client, name)


@pytest.fixture
def build_client(tmp_path):
    """Factory for clients whose app runs with non-default settings."""
    opened = []

    def _build(**overrides) -> TestClient:
        overrides.setdefault("DATABASE_URL", f"sqlite:///{tmp_path / f'app-{len(opened)}.db'}")
        c = TestClient(create_app(make_settings(tmp_path, **overrides)))
        c.__enter__()
        opened.append(c)
        return c

    yield _build
    for c in opened:
        c.__exit__(None, None, None)


@pytest.fixture
def provision_on():
    return provision
