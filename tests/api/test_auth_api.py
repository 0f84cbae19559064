"""Auth routes: registration, password login, phone sign‑in and token checks."""


def test_register_returns_account_without_password(client):
    res = client.post(
        "/api/v1/auth/register",
        json={"username": "alice", "phone_number": "+15550001", "password": "pw", "display_name": "Alice"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "alice"
    assert body["display_name"] == "Alice"
    assert "password" not in body
    assert "password_hash" not in body


def test_register_duplicate_phone_is_conflict(client, register):
    register("alice", "+15550001")
    res = client.post(
        "/api/v1/auth/register",
        json={"username": "other", "phone_number": "+15550001", "password": "pw"},
    )
    assert res.status_code == 409


def test_register_missing_fields_is_unprocessable(client):
    res = client.post("/api/v1/auth/register", json={"username": "alice"})
    assert res.status_code == 422


def test_verify_phone(client, register):
    register("alice", "+15550001")
    assert client.post("/api/v1/auth/verify-phone", json={"phone_number": "+15550001"}).json() == {"exists": True}
    assert client.post("/api/v1/auth/verify-phone", json={"phone_number": "+15550002"}).json() == {"exists": False}


def test_login_unknown_phone_is_not_found(client):
    res = client.post("/api/v1/auth/login", json={"phone_number": "+15550001", "password": "pw"})
    assert res.status_code == 404


def test_login_wrong_password_is_unauthorized(client, register):
    register("alice", "+15550001", password="right")
    res = client.post("/api/v1/auth/login", json={"phone_number": "+15550001", "password": "wrong"})
    assert res.status_code == 401


def test_me_returns_token_owner(client, register):
    account, headers = register("alice", "+15550001")
    res = client.get("/api/v1/auth/me", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == account["id"]


def test_me_requires_token(client):
    assert client.get("/api/v1/auth/me").status_code == 401
    assert client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_phone_login_registers_and_issues_token(client, verifier):
    res = client.post(
        "/api/v1/auth/phone-login",
        json={"phone_number": "+15550003", "id_token": "token-carol", "display_name": "Carol"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["account"]["username"] == "user_15550003"
    assert body["token_type"] == "bearer"
    assert verifier.calls == [("+15550003", "token-carol")]

    again = client.post("/api/v1/auth/phone-login", json={"phone_number": "+15550003", "id_token": "token-carol"})
    assert again.json()["account"]["id"] == body["account"]["id"]


def test_phone_login_rejected_token(client):
    res = client.post("/api/v1/auth/phone-login", json={"phone_number": "+15550003", "id_token": "forged"})
    assert res.status_code == 401


def test_phone_login_without_provider_is_unavailable(store):
    from fastapi.testclient import TestClient

    from taskboard_api.app.main import create_app

    app = create_app(store=store)
    app.state.identity_verifier = None
    with TestClient(app) as test_client:
        res = test_client.post("/api/v1/auth/phone-login", json={"phone_number": "+15550003", "id_token": "t"})
    assert res.status_code == 503


def test_security_headers_are_set(client):
    res = client.post("/api/v1/auth/verify-phone", json={"phone_number": "+15550001"})
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert res.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
    assert "Content-Security-Policy" not in res.headers


def test_slow_identity_provider_does_not_stall_other_requests(store):
    import threading
    import time
    from concurrent.futures import ThreadPoolExecutor

    from fastapi.testclient import TestClient

    from taskboard_api.app.main import create_app

    entered = threading.Event()
    released = threading.Event()

    class SlowVerifier:
        def verify_identity(self, phone_number, proof):
            entered.set()
            released.wait(timeout=5)
            return phone_number

    with TestClient(create_app(store=store, identity_verifier=SlowVerifier())) as test_client:
        with ThreadPoolExecutor(max_workers=1) as pool:
            pending = pool.submit(
                test_client.post,
                "/api/v1/auth/phone-login",
                json={"phone_number": "+15550003", "id_token": "slow"},
            )
            assert entered.wait(timeout=5)

            started = time.monotonic()
            res = test_client.post("/api/v1/auth/verify-phone", json={"phone_number": "+15550001"})
            elapsed = time.monotonic() - started
            released.set()

            assert res.status_code == 200
            assert elapsed < 2
            assert pending.result(timeout=10).status_code == 200
