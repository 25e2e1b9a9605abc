"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_registry.domain.car import Car
from car_registry.domain.errors import NotFoundError
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.car_id import parse_car_id


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: str


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Validate car_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if car doesn't exist
    """

    def __init__(self, car_repository: CarRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_repository: Repository for car data access
        """
        self._car_repository = car_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If car with given ID doesn't exist
        """
        car_id = parse_car_id(request.car_id)

        car = self._car_repository.find_by_id(car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return GetCarByIdResponse(car=car)
