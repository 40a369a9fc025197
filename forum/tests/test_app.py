from __future__ import annotations

from flask.testing import FlaskClient


def test_unknown_route_is_json(client: FlaskClient) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json() == {"error": "not_found"}


def test_wrong_method_is_json(client: FlaskClient) -> None:
    response = client.get("/api/auth/login")

    assert response.status_code == 405
    assert response.get_json() == {"error": "method_not_allowed"}


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/api/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"


def test_malformed_request_id_is_replaced(client: FlaskClient) -> None:
    response = client.get("/api/health", headers={"X-Request-ID": "bad id\twith spaces"})

    request_id = response.headers["X-Request-ID"]
    assert request_id and " " not in request_id


def test_security_headers(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Referrer-Policy"] == "no-referrer"
