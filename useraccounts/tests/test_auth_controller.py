from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from useraccounts.application.use_cases.users.login_user import LoginUserUseCase
from useraccounts.domain.users.entities import LoginResult
from useraccounts.domain.users.exceptions import InvalidCredentialsError
from useraccounts.interfaces.http.controllers.auth_controller import AuthController
from useraccounts.shared.middleware.error_handler import configure_error_handling
from useraccounts.shared.middleware.request_logger import client_ip


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_login_endpoint_returns_token(flask_app: Flask) -> None:
    login_called: dict[str, tuple[str, str]] = {}

    class StubLogin:
        def execute(self, username: str, password: str) -> LoginResult:
            login_called["args"] = (username, password)
            return LoginResult(user_id=1, token="token123")

    controller = AuthController(login_use_case=cast(LoginUserUseCase, StubLogin()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "pw123"})

    assert response.status_code == 200
    assert login_called["args"] == ("alice", "pw123")
    assert response.get_json() == {
        "message": "Login successful",
        "user_id": 1,
        "token": "token123",
    }


@pytest.mark.parametrize(
    ("body", "missing"),
    [
        ({"username": "alice"}, ["password"]),
        ({"password": "pw123"}, ["username"]),
        ({}, ["password", "username"]),
    ],
)
def test_login_missing_fields_returns_400(
    flask_app: Flask, body: dict, missing: list[str]
) -> None:
    login = MagicMock()
    controller = AuthController(login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == missing
    login.execute.assert_not_called()


def test_login_non_json_body_returns_400(flask_app: Flask) -> None:
    controller = AuthController(login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", data="username=alice", content_type="text/plain")

    assert response.status_code == 400


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "bad"})

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "invalid_credentials",
        "message": "Invalid credentials",
    }


def test_unexpected_error_is_masked(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("database exploded with secret details")
    controller = AuthController(login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "pw"})

    assert response.status_code == 500
    assert response.get_json()["error"] == "internal_error"
    assert "secret" not in response.get_data(as_text=True)


def test_client_ip_prefers_first_forwarded_hop(flask_app: Flask) -> None:
    headers = {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
    with flask_app.test_request_context("/login", headers=headers):
        assert client_ip() == "203.0.113.7"

    with flask_app.test_request_context("/login", environ_base={"REMOTE_ADDR": "198.51.100.2"}):
        assert client_ip() == "198.51.100.2"
