"""Delete car use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_registry.domain.errors import NotFoundError
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.car_id import parse_car_id


@dataclass(frozen=True, slots=True)
class DeleteCarRequest:
    car_id: str


class DeleteCar:
    """
    Use case for deleting a car by ID.

    The repository ignores unknown ids; this use case reports them instead
    so callers can tell a delete from a no-op.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._car_repository = car_repository

    def execute(self, request: DeleteCarRequest) -> None:
        """
        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If car with given ID doesn't exist
        """
        car_id = parse_car_id(request.car_id)

        if not self._car_repository.exists_by_id(car_id):
            raise NotFoundError(resource="Car", identifier=request.car_id)

        self._car_repository.delete_by_id(car_id)
