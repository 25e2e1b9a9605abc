from __future__ import annotations

from car_registry.ports.car_repository import CarRepository


class CountCars:
    def __init__(self, car_repository: CarRepository) -> None:
        self._car_repository = car_repository

    def execute(self) -> int:
        return self._car_repository.count()
