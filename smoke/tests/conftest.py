"""Test configuration for the smoke test."""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from smoke.app import app
from smoke.services.db.connector import close_connections

SUPABASE_URL = "https://example.supabase.co"
SUPABASE_ANON_KEY = "test-anon-key"

INSERTED_ROWS = [
    {
        "id": 1,
        "text": "smoke 2024-01-01T00:00:00.000Z",
        "created_at": "2024-01-01T00:00:00.000Z",
    }
]

RECENT_ROWS = [
    {"id": 3, "text": "smoke c", "created_at": "2024-01-03T00:00:00.000Z"},
    {"id": 2, "text": "smoke b", "created_at": "2024-01-02T00:00:00.000Z"},
    {"id": 1, "text": "smoke a", "created_at": "2024-01-01T00:00:00.000Z"},
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run each test without ambient Supabase settings or a stray .env file."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    close_connections()
    yield
    close_connections()


@pytest.fixture
def supabase_env(monkeypatch):
    """Provide valid Supabase settings."""
    monkeypatch.setenv("SUPABASE_URL", SUPABASE_URL)
    monkeypatch.setenv("SUPABASE_ANON_KEY", SUPABASE_ANON_KEY)


@pytest.fixture
def inserted_rows():
    """Rows returned by a successful insert."""
    return INSERTED_ROWS


@pytest.fixture
def recent_rows():
    """Rows returned by a successful select, newest first."""
    return RECENT_ROWS


@pytest.fixture
def supabase_client(mocker):
    """Create a mock Supabase client whose three calls succeed."""
    client = mocker.MagicMock()
    client.auth.sign_in_anonymously.return_value = SimpleNamespace(
        user=SimpleNamespace(id="u-123"), session=None
    )
    table = client.table.return_value
    table.insert.return_value.execute.return_value = SimpleNamespace(data=INSERTED_ROWS)
    (
        table.select.return_value.order.return_value.limit.return_value.execute.return_value
    ) = SimpleNamespace(data=RECENT_ROWS)
    return client


@pytest.fixture
def mock_create_client(mocker, supabase_client):
    """Patch the client factory to hand out the mock client."""
    return mocker.patch(
        "smoke.services.db.connector.create_client", return_value=supabase_client
    )


@pytest.fixture(scope="session")
def app_instance():
    """Create an application instance for testing."""
    return app


@pytest.fixture
def client(app_instance):
    """Create a test client for the FastAPI application."""
    with TestClient(app_instance) as test_client:
        yield test_client
