from __future__ import annotations

from dataclasses import dataclass

from car_registry.domain.car import Car, Paging, Sort
from car_registry.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class ListCarsRequest:
    paging: Paging
    sort: Sort | None = None


@dataclass(frozen=True, slots=True)
class ListCarsResponse:
    cars: list[Car]
    total_count: int


class ListCars:
    """
    Paginated, optionally sorted listing of all cars.

    Validates paging and sort, then delegates to the repository.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._car_repository = car_repository

    def execute(self, request: ListCarsRequest) -> ListCarsResponse:
        """
        Raises:
            PagingValidationError: If paging parameters are invalid
            SortValidationError: If sort parameters are invalid
        """
        request.paging.validate()
        if request.sort is not None:
            request.sort.validate()

        page = self._car_repository.find_page(paging=request.paging, sort=request.sort)

        return ListCarsResponse(cars=page.cars, total_count=page.total_count)
