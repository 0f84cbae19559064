"""Root conftest: shared fixtures.

Every test gets its own EntityStore; the HTTP client is built from
``create_app`` with that store and a fake identity verifier, so nothing
leaks between tests and no request reaches the real identity provider.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("FIREBASE_API_KEY", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from taskboard_api.app.core.identity import IdentityVerificationError
from taskboard_api.app.core.security import hash_password
from taskboard_api.app.core.store import EntityStore
from taskboard_api.app.main import create_app
from taskboard_api.app.schemas.account import AccountCreate
from taskboard_api.app.services.account_service import AccountService
from taskboard_api.app.services.board_service import BoardService
from taskboard_api.app.services.member_service import MemberService
from taskboard_api.app.services.query_service import QueryService
from taskboard_api.app.services.todo_service import TodoService


class FakeIdentityVerifier:
    """Accepts exactly the (token -> phone number) pairs it was given."""

    def __init__(self, tokens=None):
        self.tokens = dict(tokens or {})
        self.calls = []

    def verify_identity(self, phone_number, proof):
        self.calls.append((phone_number, proof))
        if self.tokens.get(proof) != phone_number:
            raise IdentityVerificationError("Identity token rejected")
        return phone_number


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def queries(store):
    return QueryService(store)


@pytest.fixture
def accounts(store):
    return AccountService(store)


@pytest.fixture
def boards(store):
    return BoardService(store)


@pytest.fixture
def members(store):
    return MemberService(store)


@pytest.fixture
def todos(store):
    return TodoService(store)


@pytest.fixture
def make_account(accounts):
    def _make(username, phone_number, password="secret", **extra):
        return accounts.create_account(
            AccountCreate(
                username=username,
                phone_number=phone_number,
                password_hash=hash_password(password),
                **extra,
            )
        )

    return _make


@pytest.fixture
def alice(make_account):
    return make_account("alice", "+15550001")


@pytest.fixture
def bob(make_account):
    return make_account("bob", "+15550002")


@pytest.fixture
def verifier():
    return FakeIdentityVerifier({"token-carol": "+15550003"})


@pytest.fixture
def client(store, verifier):
    with TestClient(create_app(store=store, identity_verifier=verifier)) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register an account over HTTP and return a bearer header for it."""

    def _register(username, phone_number, password="secret"):
        res = client.post(
            "/api/v1/auth/register",
            json={"username": username, "phone_number": phone_number, "password": password},
        )
        assert res.status_code == 201, res.text
        res = client.post("/api/v1/auth/login", json={"phone_number": phone_number, "password": password})
        assert res.status_code == 200, res.text
        body = res.json()
        return body["account"], {"Authorization": f"Bearer {body['access_token']}"}

    return _register
