import os

import pytest
from fastapi.testclient import TestClient

# Stable environment before settings are loaded and cached
os.environ.setdefault("TZ", "UTC")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from components.core.database import DatabaseManager  # noqa: E402
from restapi.router import create_app  # noqa: E402


@pytest.fixture
def db_manager(tmp_path):
    """Fresh SQLite database file per test."""
    return DatabaseManager(url=f"sqlite+aiosqlite:///{tmp_path / 'clinic.db'}")


@pytest.fixture
def client(db_manager):
    app = create_app(db_manager=db_manager)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_transaction(client):
    def _make(category="revenu", amount=100, description=None, date=None):
        payload = {"category": category, "amount": amount, "description": description}
        if date is not None:
            payload["date"] = date
        response = client.post("/transactions", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_activity(client):
    def _make(title="Consultation", start="2024-01-01T10:00:00", end="2024-01-01T12:00:00", description=None):
        payload = {"title": title, "start": start, "end": end, "description": description}
        response = client.post("/activites", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
