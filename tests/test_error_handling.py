import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.db.session import get_db
from app.main import app as fastapi_app


class UnavailableSession:
    """Session stand-in whose every database call fails."""

    def __init__(self):
        self.rolled_back = False

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database unavailable"))

    def add(self, instance):
        pass

    def commit(self):
        raise SQLAlchemyError("database unavailable")

    def rollback(self):
        self.rolled_back = True


@pytest.fixture
def session():
    return UnavailableSession()


@pytest.fixture
def failing_client(session):
    def override_get_db():
        yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "method, path, message",
    [
        ("get", "/api/documents", "Failed to fetch documents"),
        ("get", "/api/documents/1", "Failed to fetch document"),
        ("put", "/api/documents/1", "Failed to update document"),
        ("delete", "/api/documents/1", "Failed to delete document"),
        ("post", "/api/documents/1/share", "Failed to share document"),
        ("delete", "/api/documents/1/share", "Failed to revoke share link"),
        ("get", "/api/shared/abc", "Failed to fetch shared document"),
        ("get", "/api/notes", "Failed to fetch notes"),
        ("get", "/api/shared/notes/abc", "Failed to fetch shared note"),
        ("get", "/api/users/1", "Failed to fetch user"),
    ],
)
def test_storage_failure_returns_generic_server_error(failing_client, method, path, message):
    kwargs = {"json": {"title": "X"}} if method == "put" else {}

    response = getattr(failing_client, method)(path, **kwargs)

    assert response.status_code == 500
    assert response.json() == {"error": message}


def test_upload_storage_failure_rolls_back_and_returns_server_error(failing_client, session):
    response = failing_client.post(
        "/api/documents",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to upload document"}
    assert session.rolled_back is True


def test_client_errors_are_reported_before_storage_is_touched(failing_client):
    response = failing_client.post("/api/documents", data={"title": "No file"})

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}
