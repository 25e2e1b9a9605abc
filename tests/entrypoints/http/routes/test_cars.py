"""
Test suite for the /v1/cars routes.

The repository dependency is overridden with InMemoryCarRepository, so each
test drives the real mapper → use case → repository path without a database.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_registry.adapters.in_memory_car_repository import InMemoryCarRepository
from car_registry.domain.car import Car
from car_registry.entrypoints.http.dependencies import get_car_repository
from car_registry.entrypoints.http.exception_handlers import register_exception_handlers
from car_registry.entrypoints.http.routes.cars import router

CAR_ID = uuid.UUID("550e8400-e29b-41d4-a716-446655440000")


@pytest.fixture
def repository() -> InMemoryCarRepository:
    return InMemoryCarRepository(
        [
            Car(id=CAR_ID, make="Toyota", model="Corolla", year=2020, price=Decimal("25000.00")),
            Car(id=None, make="Honda", model="Civic", year=2021, price=Decimal("30000.00")),
            Car(id=None, make="Audi", model="A3", year=2019, price=Decimal("41000.00")),
        ]
    )


@pytest.fixture
def client(repository: InMemoryCarRepository) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router, prefix="/v1")
    app.dependency_overrides[get_car_repository] = lambda: repository
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# POST /v1/cars
# ==============================================================================


def test_create_car_returns_201_with_assigned_id(
    client: TestClient, repository: InMemoryCarRepository
) -> None:
    response = client.post(
        "/v1/cars",
        json={"make": "Kia", "model": "Rio", "year": 2022, "price": "18000.50"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["make"] == "Kia"
    assert data["price"] == "18000.50"
    assert repository.exists_by_id(uuid.UUID(data["id"]))


@pytest.mark.parametrize(
    "body",
    [
        {"make": "Kia", "model": "Rio", "year": 2022, "price": "abc"},
        {"make": "Kia", "model": "Rio", "year": 2022, "price": "1.234"},
        {"make": "Kia", "model": "Rio", "year": 2022, "price": "10000000000"},
        {"make": "Kia", "model": "Rio", "year": 2022, "price": "10000000000.00"},
        {"make": "", "model": "Rio", "year": 2022, "price": "1.00"},
        {"make": "Kia", "model": "Rio", "year": 1800, "price": "1.00"},
        {"make": "Kia", "model": "Rio", "price": "1.00"},
    ],
)
def test_create_car_rejects_invalid_body(client: TestClient, body: dict[str, object]) -> None:
    response = client.post("/v1/cars", json=body)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_create_car_with_blank_make_is_rejected_by_domain(client: TestClient) -> None:
    # Passes min_length but fails the domain's non-blank rule
    response = client.post(
        "/v1/cars",
        json={"make": "   ", "model": "Rio", "year": 2022, "price": "1.00"},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "make"


# ==============================================================================
# GET /v1/cars/{car_id}
# ==============================================================================


def test_get_car_success(client: TestClient) -> None:
    response = client.get(f"/v1/cars/{CAR_ID}")

    assert response.status_code == 200
    assert response.json() == {
        "id": str(CAR_ID),
        "make": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "price": "25000.00",
    }


def test_get_car_not_found(client: TestClient) -> None:
    missing = uuid.uuid4()

    response = client.get(f"/v1/cars/{missing}")

    assert response.status_code == 404
    assert response.json() == {
        "detail": f"Car with identifier '{missing}' not found",
        "code": "NOT_FOUND",
    }


def test_get_car_invalid_uuid(client: TestClient) -> None:
    response = client.get("/v1/cars/not-a-uuid")

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "car_id", "message": "Must be a valid UUID format", "code": "INVALID_UUID"}
    ]


# ==============================================================================
# GET /v1/cars
# ==============================================================================


def test_list_cars_default_paging(client: TestClient) -> None:
    response = client.get("/v1/cars")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["offset"] == 0
    assert data["limit"] == 20
    assert [car["make"] for car in data["cars"]] == ["Toyota", "Honda", "Audi"]


def test_list_cars_sorted_and_paged(client: TestClient) -> None:
    response = client.get(
        "/v1/cars",
        params={"sort_by": "price", "sort_dir": "desc", "offset": 1, "limit": 1},
    )

    assert response.status_code == 200
    data = response.json()
    assert [car["make"] for car in data["cars"]] == ["Honda"]
    assert data["total"] == 3


@pytest.mark.parametrize(
    "params",
    [
        {"limit": 0},
        {"limit": 201},
        {"offset": -1},
        {"sort_by": "color"},
        {"sort_by": "price", "sort_dir": "up"},
    ],
)
def test_list_cars_rejects_invalid_query(client: TestClient, params: dict[str, object]) -> None:
    response = client.get("/v1/cars", params=params)

    assert response.status_code == 422


# ==============================================================================
# GET /v1/cars/count
# ==============================================================================


def test_count_cars(client: TestClient) -> None:
    response = client.get("/v1/cars/count")

    assert response.status_code == 200
    assert response.json() == {"count": 3}


# ==============================================================================
# PUT /v1/cars/{car_id}
# ==============================================================================


def test_put_existing_car_returns_200(client: TestClient, repository: InMemoryCarRepository) -> None:
    response = client.put(
        f"/v1/cars/{CAR_ID}",
        json={"make": "Toyota", "model": "Corolla", "year": 2020, "price": "23999.99"},
    )

    assert response.status_code == 200
    assert response.json()["price"] == "23999.99"
    assert repository.count() == 3


def test_put_unknown_car_returns_201(client: TestClient, repository: InMemoryCarRepository) -> None:
    new_id = uuid.uuid4()

    response = client.put(
        f"/v1/cars/{new_id}",
        json={"make": "Kia", "model": "Rio", "year": 2022, "price": "18000"},
    )

    assert response.status_code == 201
    assert response.json()["id"] == str(new_id)
    assert repository.exists_by_id(new_id)


def test_put_invalid_uuid(client: TestClient) -> None:
    response = client.put(
        "/v1/cars/123",
        json={"make": "Kia", "model": "Rio", "year": 2022, "price": "18000"},
    )

    assert response.status_code == 422


# ==============================================================================
# DELETE /v1/cars/{car_id}
# ==============================================================================


def test_delete_car_returns_204(client: TestClient, repository: InMemoryCarRepository) -> None:
    response = client.delete(f"/v1/cars/{CAR_ID}")

    assert response.status_code == 204
    assert response.content == b""
    assert not repository.exists_by_id(CAR_ID)


def test_delete_unknown_car_returns_404(client: TestClient) -> None:
    response = client.delete(f"/v1/cars/{uuid.uuid4()}")

    assert response.status_code == 404


def test_delete_invalid_uuid_returns_422(client: TestClient) -> None:
    response = client.delete("/v1/cars/xyz")

    assert response.status_code == 422
