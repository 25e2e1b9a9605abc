"""
Unit tests for FastAPI application setup.

- build_app() creates a configured FastAPI instance
- Routers are registered with the right prefixes
- OpenAPI schema documents every car operation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_registry.entrypoints.http.app import build_app


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Car Registry API"
    assert app.version == "0.1.0"
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_health_endpoint_responds() -> None:
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_openapi_documents_car_operations() -> None:
    paths = build_app().openapi()["paths"]

    # Cars live under /v1 only
    assert "/cars" not in paths
    assert set(paths["/v1/cars"]) == {"get", "post"}
    assert set(paths["/v1/cars/{car_id}"]) == {"get", "put", "delete"}
    assert set(paths["/v1/cars/count"]) == {"get"}


def test_openapi_documents_list_query_parameters() -> None:
    operation = build_app().openapi()["paths"]["/v1/cars"]["get"]

    assert operation["summary"] == "List cars"
    assert "Cars" in operation["tags"]
    assert {p["name"] for p in operation["parameters"]} == {
        "offset",
        "limit",
        "sort_by",
        "sort_dir",
    }


def test_app_returns_404_for_unknown_routes() -> None:
    client = TestClient(build_app())

    assert client.get("/unknown").status_code == 404
    assert client.get("/v1/unknown").status_code == 404


def test_module_level_app_is_from_build_app() -> None:
    from car_registry.entrypoints.http.app import app

    assert isinstance(app, FastAPI)
    assert app.title == "Car Registry API"
