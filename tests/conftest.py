"""Shared test fixtures for user-mgmt."""

import os
import tempfile
import uuid

import pytest

from user_mgmt.config import Settings
from user_mgmt.db import UserStore, init_db
from user_mgmt.environment import Environment
from user_mgmt.main import create_app


class FakeSessionService:
    """In-memory stand-in for the remote session service."""

    def __init__(self):
        self.sessions: dict[str, dict] = {}
        self.deleted: list[str] = []
        self.fail_create = False
        self.fail_delete = False

    def create_session(self, payload: dict) -> str:
        if self.fail_create:
            from user_mgmt.exceptions import UpstreamError
            raise UpstreamError("Session service unavailable")
        session_id = uuid.uuid4().hex
        self.sessions[session_id] = dict(payload)
        return session_id

    def fetch_session(self, session_id: str):
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> None:
        self.deleted.append(session_id)
        if self.fail_delete:
            # Mirrors HttpSessionService: failures are swallowed
            return
        self.sessions.pop(session_id, None)


@pytest.fixture
def db_path():
    """Temporary SQLite file with the user schema applied."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(path)
    init_db(path)

    yield path

    try:
        os.unlink(path)
    except OSError:
        pass


@pytest.fixture
def test_settings(db_path):
    """Settings pointing at the temporary database."""
    return Settings(database_path=db_path, session_service_url="http://sessions.test")


@pytest.fixture
def user_store(db_path):
    """UserStore backed by the temporary database."""
    return UserStore(db_path)


@pytest.fixture
def session_service():
    """In-memory session service."""
    return FakeSessionService()


@pytest.fixture
def environment(test_settings, user_store, session_service):
    """Environment wired with the temporary store and fake session service."""
    return Environment(settings=test_settings, users=user_store, sessions=session_service)


@pytest.fixture
def app(environment):
    """Flask app under test."""
    app = create_app(environment)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing.

    The cookie jar is disabled so tests send the Cookie header explicitly.
    """
    with app.test_client(use_cookies=False) as client:
        yield client


@pytest.fixture
def registered_user(client):
    """Register a user through the API.

    Returns a tuple of (registration body, password).
    """
    body = {"username": "alice", "password": "s3cret", "firstName": "Alice", "lastName": "Liddell"}
    response = client.post("/register", json=body)
    assert response.status_code == 201
    return body, body["password"]


@pytest.fixture
def session_cookie(client, registered_user):
    """Log the registered user in and return the session id."""
    body, password = registered_user
    response = client.post("/login", json={"username": body["username"], "password": password})
    assert response.status_code == 200
    header = response.headers["Set-Cookie"]
    return header.split(";", 1)[0].split("=", 1)[1]
