from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Iterable
from uuid import UUID

from car_registry.domain.car import Car, Paging, Sort, SortDirection
from car_registry.ports.car_repository import CarPage, CarRepository


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order (an update keeps the original position)
    - Assigns UUID4 ids to unsaved cars
    - Applies sorting BEFORE paging
    - Returns total_count of all cars before paging
    """

    def __init__(self, cars: Iterable[Car] = ()) -> None:
        self._cars: dict[UUID, Car] = {}
        for car in cars:
            self.save(car)

    def save(self, car: Car) -> Car:
        car_id = car.id or uuid.uuid4()
        stored = dataclasses.replace(car, id=car_id)
        self._cars[car_id] = stored
        return stored

    def find_by_id(self, car_id: UUID) -> Car | None:
        return self._cars.get(car_id)

    def find_all(self, sort: Sort | None = None) -> list[Car]:
        return self._sorted(list(self._cars.values()), sort)

    def find_all_by_id(self, car_ids: Iterable[UUID]) -> list[Car]:
        wanted = set(car_ids)
        return [car for car_id, car in self._cars.items() if car_id in wanted]

    def find_page(self, paging: Paging, sort: Sort | None = None) -> CarPage:
        # Trust that UseCase has validated inputs (contract programming)
        cars = self.find_all(sort)

        start = paging.offset
        end = paging.offset + paging.limit

        return CarPage(cars=cars[start:end], total_count=len(cars))

    def count(self) -> int:
        return len(self._cars)

    def exists_by_id(self, car_id: UUID) -> bool:
        return car_id in self._cars

    def delete_by_id(self, car_id: UUID) -> None:
        self._cars.pop(car_id, None)

    def delete_all(self) -> int:
        removed = len(self._cars)
        self._cars.clear()
        return removed

    def _sorted(self, cars: list[Car], sort: Sort | None) -> list[Car]:
        if sort is None:
            return cars

        reverse = sort.direction is SortDirection.DESC
        # Two stable passes: id tie-break first, then the requested key
        cars = sorted(cars, key=lambda car: str(car.id), reverse=reverse)
        return sorted(cars, key=lambda car: getattr(car, sort.field.value), reverse=reverse)
