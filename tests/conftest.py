import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.init_db import seed_demo_user
from app.db.session import Base, get_db
from app.main import app as fastapi_app
from app.models.document import Document  # noqa: F401 - registers the table
from app.models.note import Note  # noqa: F401
from app.models.user import User  # noqa: F401


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    seed_demo_user(session)
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: startup hooks would touch the real database
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def upload(client):
    """POST a file to /api/documents and return the response."""
    def _upload(filename="notes.txt", data=b"hello", mime_type="text/plain", headers=None, **fields):
        return client.post(
            "/api/documents",
            files={"file": (filename, data, mime_type)},
            data=fields,
            headers=headers,
        )
    return _upload
