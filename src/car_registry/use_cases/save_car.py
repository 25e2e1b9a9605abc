"""Create-or-update car use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_registry.domain.car import Car
from car_registry.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class SaveCarRequest:
    car: Car


@dataclass(frozen=True, slots=True)
class SaveCarResponse:
    car: Car
    created: bool


class SaveCar:
    """
    Use case for storing a car.

    Responsibilities:
    - Validate entity rules (single source of validation)
    - Tell callers whether the car was created or replaced
    - Delegate persistence to the repository
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._car_repository = car_repository

    def execute(self, request: SaveCarRequest) -> SaveCarResponse:
        """
        Execute the save.

        Raises:
            CarValidationError: If the car violates entity rules
        """
        request.car.validate()

        created = request.car.id is None or not self._car_repository.exists_by_id(request.car.id)
        car = self._car_repository.save(request.car)

        return SaveCarResponse(car=car, created=created)
