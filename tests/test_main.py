import pytest
from flask import Flask


@pytest.mark.web
def test_create_app(app):
    assert isinstance(app, Flask)
    for name in ("main", "products", "api", "weather", "textgen", "ui"):
        assert name in app.blueprints


@pytest.mark.web
def test_hello_world(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.data == b"Hello, World!"


@pytest.mark.web
def test_hello_name_is_rendered_and_escaped(client):
    response = client.get("/hello/Ada")
    assert response.status_code == 200
    assert "Hello, Ada!" in response.data.decode("utf-8")

    response = client.get("/hello/<script>")
    html = response.data.decode("utf-8")
    assert "<script>!" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.web
def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


@pytest.mark.api
def test_unknown_route_returns_json_404(client):
    response = client.get("/route-that-does-not-exist")
    assert response.status_code == 404
    assert response.get_json()["error"]["code"] == "not_found"


@pytest.mark.api
def test_method_not_allowed_is_json(client):
    response = client.delete("/weather")
    assert response.status_code == 405
    assert response.get_json()["error"]["code"] == "method_not_allowed"
