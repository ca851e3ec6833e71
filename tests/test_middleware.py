# tests/test_middleware.py

import logging

from newsletter.config import Environments


def test_security_headers_only_in_production(make_app):
    production = make_app(Environments.PRODUCTION).test_client().get("/users")
    assert production.headers["X-Content-Type-Options"] == "nosniff"
    assert production.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert "Content-Security-Policy" in production.headers
    assert "Strict-Transport-Security" in production.headers

    test_env = make_app(Environments.TEST).test_client().get("/users")
    assert "X-Content-Type-Options" not in test_env.headers
    assert "Content-Security-Policy" not in test_env.headers


def test_security_headers_on_error_responses(make_app):
    response = make_app(Environments.PRODUCTION).test_client().delete("/api/users/delete/1")
    assert response.status_code == 404
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_requests_logged_in_development(make_app, caplog):
    caplog.set_level(logging.INFO, logger="newsletter.middleware")
    make_app(Environments.DEV).test_client().get("/api/users/all?page=1")

    lines = [r.getMessage() for r in caplog.records if r.name == "newsletter.middleware"]
    assert len(lines) == 1
    assert lines[0].startswith("GET /api/users/all?page=1 200 ")
    assert lines[0].endswith(" ms")


def test_requests_not_logged_outside_development(make_app, caplog):
    caplog.set_level(logging.INFO, logger="newsletter.middleware")
    make_app(Environments.PRODUCTION).test_client().get("/api/users/all")
    assert not [r for r in caplog.records if r.name == "newsletter.middleware"]


def test_cookie_secret_comes_from_config(make_app):
    app = make_app(SECRET_KEY="s3cret")
    assert app.secret_key == "s3cret"


def test_cors_headers_present(client):
    response = client.get("/api/users/all", headers={"Origin": "http://example.com"})
    assert response.headers["Access-Control-Allow-Origin"] in ("*", "http://example.com")
