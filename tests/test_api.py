"""Application-level tests: health, docs and error responses."""

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from blog_api.api.routes import ROUTES
from blog_api.errors import InternalError
from blog_api.main import create_app


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_openapi_lists_every_route(client):
    response = client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    for route in ROUTES:
        assert route.method.lower() in paths[route.path]


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    body = response.json()
    assert body["code"] == "NOT_FOUND"
    assert body["path"] == "/api/nope"


def test_method_not_allowed(client):
    response = client.patch("/api/categories")
    assert response.status_code == 405
    assert response.json()["code"] == "METHOD_NOT_ALLOWED"


def test_malformed_json_is_validation_error(client, auth_headers):
    response = client.post(
        "/api/posts",
        headers={**auth_headers, "Content-Type": "application/json"},
        content=b"{not json",
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_unexpected_error_is_hidden(settings):
    app = create_app(settings)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "INTERNAL_ERROR"
    assert "hunter2" not in body["message"]


def test_database_outage_is_retryable(settings):
    app = create_app(settings)

    @app.get("/db-down")
    def db_down():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    with TestClient(app) as test_client:
        response = test_client.get("/db-down")

    assert response.status_code == 503
    assert response.json()["code"] == "SERVICE_UNAVAILABLE"


def test_internal_error_is_logged_and_reported(settings, caplog):
    app = create_app(settings)

    @app.get("/broken")
    def broken():
        raise InternalError("post 7 has no author")

    with TestClient(app) as test_client:
        response = test_client.get("/broken")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"
    assert "post 7 has no author" in caplog.text
    assert "post 7" not in response.json()["message"]
