"""Test suite for DeleteCar use case."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from car_registry.adapters.in_memory_car_repository import InMemoryCarRepository
from car_registry.domain.car import Car
from car_registry.domain.errors import NotFoundError, ValidationError
from car_registry.use_cases.delete_car import DeleteCar, DeleteCarRequest


@pytest.fixture()
def repository() -> InMemoryCarRepository:
    return InMemoryCarRepository()


def test_delete_existing_car(repository: InMemoryCarRepository) -> None:
    stored = repository.save(
        Car(id=None, make="Toyota", model="Corolla", year=2020, price=Decimal("25000.00"))
    )

    DeleteCar(repository).execute(DeleteCarRequest(car_id=str(stored.id)))

    assert repository.count() == 0


def test_delete_unknown_car_raises_not_found(repository: InMemoryCarRepository) -> None:
    car_id = str(uuid.uuid4())

    with pytest.raises(NotFoundError) as exc_info:
        DeleteCar(repository).execute(DeleteCarRequest(car_id=car_id))

    assert exc_info.value.context["identifier"] == car_id


def test_delete_rejects_invalid_uuid(repository: InMemoryCarRepository) -> None:
    with pytest.raises(ValidationError):
        DeleteCar(repository).execute(DeleteCarRequest(car_id="nope"))
