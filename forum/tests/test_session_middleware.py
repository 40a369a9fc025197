from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from flask import Flask, g, jsonify, request

from forum.application.use_cases.users.resolve_session import ResolveSessionUseCase
from forum.domain.users.entities import User
from forum.domain.users.exceptions import UnauthorizedError
from forum.infrastructure.session_middleware import SessionAuthenticator
from forum.shared.middleware.error_handler import configure_error_handling

ALICE = User(
    id=7,
    username="alice",
    email="a@x.com",
    password_hash="hash",
    created_at=datetime.now(UTC),
)


@pytest.fixture()
def resolve() -> MagicMock:
    stub = MagicMock(spec=ResolveSessionUseCase)
    stub.execute.side_effect = lambda token: ALICE if token == "good" else None
    return stub


@pytest.fixture()
def authenticator(resolve: MagicMock) -> SessionAuthenticator:
    return SessionAuthenticator(resolve_session=resolve, cookie_name="session_id")


@pytest.fixture()
def flask_app(authenticator: SessionAuthenticator) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    calls: list[int] = []
    app.config["calls"] = calls

    @app.get("/private")
    @authenticator.required
    def private():
        calls.append(g.user_id)
        return jsonify({"user": g.user.username})

    return app


def test_missing_cookie_is_rejected_without_touching_cookie(
    flask_app: Flask, resolve: MagicMock
) -> None:
    with flask_app.test_client() as client:
        response = client.get("/private")

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}
    assert "Set-Cookie" not in response.headers
    resolve.execute.assert_not_called()
    assert flask_app.config["calls"] == []


def test_invalid_session_clears_cookie(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        client.set_cookie("session_id", "stale")
        response = client.get("/private")

    assert response.status_code == 401
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("session_id=;")
    assert "Expires=Thu, 01 Jan 1970" in cookie
    assert flask_app.config["calls"] == []


def test_valid_session_attaches_user(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        client.set_cookie("session_id", "good")
        response = client.get("/private")

    assert response.status_code == 200
    assert response.get_json() == {"user": "alice"}
    assert flask_app.config["calls"] == [7]


def test_authenticate_returns_authenticated_request(
    flask_app: Flask, authenticator: SessionAuthenticator
) -> None:
    with flask_app.test_request_context("/", headers={"Cookie": "session_id=good"}):
        result = authenticator.authenticate(request)

        assert result.user == ALICE
        assert result.token == "good"
        assert g.user_id == 7


def test_authenticate_flags_cookie_clearing_only_for_bad_tokens(
    flask_app: Flask, authenticator: SessionAuthenticator
) -> None:
    with flask_app.test_request_context("/"):
        with pytest.raises(UnauthorizedError) as missing:
            authenticator.authenticate(request)
    with flask_app.test_request_context("/", headers={"Cookie": "session_id=bad"}):
        with pytest.raises(UnauthorizedError) as invalid:
            authenticator.authenticate(request)

    assert missing.value.clear_cookie is False
    assert invalid.value.clear_cookie is True
