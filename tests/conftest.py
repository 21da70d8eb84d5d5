import pytest
from fastapi.testclient import TestClient

from user_session_web.app import create_app
from user_session_web.config import Settings
from user_session_web.models.credentials import HashedCredential
from user_session_web.models.store import UserStore

# Cheapest cost bcrypt accepts; keeps hashing fast in tests.
TEST_ROUNDS = 4


@pytest.fixture
def settings(monkeypatch):
    for name in (
        "PORT",
        "HOST",
        "SESSION_SECRET",
        "CREDENTIAL_SCHEME",
        "USER_ID_SCHEME",
        "USERS_JSON_ENABLED",
        "LOG_LEVEL",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SESSION_SECRET", "test-secret")
    monkeypatch.setenv("BCRYPT_ROUNDS", str(TEST_ROUNDS))
    return Settings()


@pytest.fixture
def store():
    return UserStore(credential=HashedCredential(rounds=TEST_ROUNDS))


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
