from __future__ import annotations

import pytest
from flask import Flask

from useraccounts.app import create_app
from useraccounts.application.services.token_service import JwtTokenService
from useraccounts.domain.users.entities import TokenClaims
from useraccounts.shared.config import AppConfig, DatabaseConfig, TokenConfig
from useraccounts.tests.fakes import TEST_SECRET


@pytest.fixture()
def app() -> Flask:
    config = AppConfig(
        database=DatabaseConfig(url="sqlite://"),
        token=TokenConfig(secret_key=TEST_SECRET, ttl_seconds=3600),
    )
    return create_app(config)


def _register(client, username: str, password: str, email: str) -> int:
    response = client.post(
        "/users", json={"username": username, "password": password, "email": email}
    )
    assert response.status_code == 201
    return response.get_json()["id"]


def test_register_login_update_fetch_flow(app: Flask) -> None:
    with app.test_client() as client:
        assert _register(client, "alice", "pw123", "a@x.com") == 1

        login = client.post("/login", json={"username": "alice", "password": "pw123"})
        assert login.status_code == 200
        body = login.get_json()
        assert body["user_id"] == 1
        token = body["token"]
        assert JwtTokenService(TEST_SECRET).verify(token) == TokenClaims(user_id=1)

        update = client.put(
            "/users/1",
            json={"email": "new@x.com"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert update.status_code == 200

        fetched = client.get("/users/1").get_json()
        assert fetched["email"] == "new@x.com"
        assert fetched["username"] == "alice"

        # password untouched by the email-only update
        relogin = client.post("/login", json={"username": "alice", "password": "pw123"})
        assert relogin.status_code == 200


def test_token_for_other_user_is_forbidden(app: Flask) -> None:
    with app.test_client() as client:
        _register(client, "alice", "pw123", "a@x.com")
        _register(client, "bob", "pw456", "b@x.com")
        bob_token = client.post(
            "/login", json={"username": "bob", "password": "pw456"}
        ).get_json()["token"]

        headers = {"Authorization": f"Bearer {bob_token}"}
        assert client.put("/users/1", json={"email": "evil@x.com"}, headers=headers).status_code == 403
        assert client.delete("/users/1", headers=headers).status_code == 403
        assert client.get("/users/1").get_json()["email"] == "a@x.com"


def test_fetch_unknown_user_returns_404(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/users/999")

    assert response.status_code == 404
    assert response.get_json() == {"error": "user_not_found", "message": "User not found"}


def test_login_failures_look_identical(app: Flask) -> None:
    with app.test_client() as client:
        _register(client, "alice", "pw123", "a@x.com")

        wrong_password = client.post("/login", json={"username": "alice", "password": "nope"})
        unknown_user = client.post("/login", json={"username": "ghost", "password": "pw123"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json()


def test_duplicate_registration_keeps_one_record(app: Flask) -> None:
    with app.test_client() as client:
        _register(client, "alice", "pw123", "a@x.com")
        second = client.post(
            "/users", json={"username": "alice", "password": "x", "email": "other@x.com"}
        )

        assert second.status_code == 400
        assert second.get_json()["error"] == "user_already_exists"
        assert client.get("/users/1").get_json()["email"] == "a@x.com"
        assert client.get("/users/2").status_code == 404


def test_password_change_and_rename_keep_token_valid(app: Flask) -> None:
    with app.test_client() as client:
        _register(client, "alice", "pw123", "a@x.com")
        token = client.post(
            "/login", json={"username": "alice", "password": "pw123"}
        ).get_json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = client.put(
            "/users/1", json={"username": "alicia", "password": "n3w"}, headers=headers
        )
        assert response.status_code == 200

        assert client.post("/login", json={"username": "alice", "password": "pw123"}).status_code == 401
        assert client.post("/login", json={"username": "alicia", "password": "n3w"}).status_code == 200
        # the token binds to the id only, so the rename does not invalidate it
        assert client.put("/users/1", json={"email": "z@x.com"}, headers=headers).status_code == 200


def test_delete_then_fetch(app: Flask) -> None:
    with app.test_client() as client:
        _register(client, "alice", "pw123", "a@x.com")
        token = client.post(
            "/login", json={"username": "alice", "password": "pw123"}
        ).get_json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        assert client.delete("/users/1", headers=headers).status_code == 200
        assert client.get("/users/1").status_code == 404
        assert client.put("/users/1", json={"email": "x@x.com"}, headers=headers).status_code == 404


def test_security_headers_present(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/users/1")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Request-ID"]


def test_ids_beyond_sqlite_integer_range_are_not_found(app: Flask) -> None:
    with app.test_client() as client:
        _register(client, "alice", "pw123", "a@x.com")
        response = client.get("/users/99999999999999999999")

    assert response.status_code == 404
    assert response.get_json()["error"] == "user_not_found"
