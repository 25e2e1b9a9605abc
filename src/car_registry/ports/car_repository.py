from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from car_registry.domain.car import Car, Paging, Sort


@dataclass(frozen=True)
class CarPage:
    """One page of cars plus the total number of stored cars."""

    cars: list[Car]
    total_count: int


class CarRepository(ABC):
    """
    Port for car data access, keyed by UUID.

    Implementations provide create-or-update, lookup, listing with paging and
    sorting, counting and deletion for the Car entity.

    Contract (Preconditions):
        - cars, paging and sort are validated by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Ordering:
        - Without a Sort, results come back in a stable implementation-defined
          order (insertion order in memory, creation time in SQL)
        - With a Sort, ties are broken by id
    """

    @abstractmethod
    def save(self, car: Car) -> Car:
        """
        Create or update a car.

        A car without an id gets a fresh UUID4. A car whose id is already
        stored replaces the stored values; an unknown id is inserted as-is.

        Returns:
            The stored car (always with an id)
        """
        ...

    def save_all(self, cars: Iterable[Car]) -> list[Car]:
        """Save each car in order and return the stored cars."""
        return [self.save(car) for car in cars]

    @abstractmethod
    def find_by_id(self, car_id: UUID) -> Car | None: ...

    @abstractmethod
    def find_all(self, sort: Sort | None = None) -> list[Car]: ...

    @abstractmethod
    def find_all_by_id(self, car_ids: Iterable[UUID]) -> list[Car]:
        """Return the cars whose ids are given. Unknown ids are skipped."""
        ...

    @abstractmethod
    def find_page(self, paging: Paging, sort: Sort | None = None) -> CarPage:
        """
        Return one page of cars.

        Args:
            paging: Offset/limit - pre-validated
            sort: Optional ordering - pre-validated

        Returns:
            CarPage with the page content and the total count before paging
        """
        ...

    @abstractmethod
    def count(self) -> int: ...

    @abstractmethod
    def exists_by_id(self, car_id: UUID) -> bool: ...

    @abstractmethod
    def delete_by_id(self, car_id: UUID) -> None:
        """Delete the car with the given id. Unknown ids are ignored."""
        ...

    def delete(self, car: Car) -> None:
        """Delete the given car by its id. Unsaved cars are ignored."""
        if car.id is not None:
            self.delete_by_id(car.id)

    def delete_all_by_id(self, car_ids: Iterable[UUID]) -> None:
        for car_id in car_ids:
            self.delete_by_id(car_id)

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every car and return how many were removed."""
        ...

    def flush(self) -> None:
        """Push pending writes to the store without ending the unit of work."""
