import os

# Tests never talk to a real mail server or read a developer .env identity
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "secret"
os.environ.setdefault("CONTACT_RECIPIENT", "praktijk@example.com")

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.sessions import SessionStore, get_session_store
from app.db.json_store import DocumentStore, get_document_store
from app.utils.email import get_mail_transport
from main import app


class RecordingTransport:
    """Stands in for SMTP; records every send attempt."""

    def __init__(self, error: Exception | None = None):
        self.sent = []
        self.error = error

    def send(self, message):
        self.sent.append(message)
        if self.error is not None:
            raise self.error


@pytest.fixture
def store(tmp_path):
    return DocumentStore(tmp_path / "site.json")


@pytest.fixture
def sessions():
    return SessionStore()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(store, sessions, transport, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_USERNAME", "admin")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "secret")
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_mail_transport] = lambda: transport
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    response = client.post(
        "/backoffice/login",
        data={"username": "admin", "password": "secret"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client
