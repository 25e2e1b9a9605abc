from __future__ import annotations

from decimal import Decimal

from car_registry.domain.car import Car, Paging, Sort, SortDirection, SortField
from car_registry.entrypoints.http.dtos.car import (
    CarListResponseDTO,
    CarResponseDTO,
    CarsListQueryDTO,
    CarWriteDTO,
)
from car_registry.use_cases.car_id import parse_car_id
from car_registry.use_cases.list_cars import ListCarsRequest, ListCarsResponse
from car_registry.use_cases.save_car import SaveCarRequest


class CarMapper:
    """Maps between REST DTOs and domain models for cars."""

    @staticmethod
    def to_save_request(dto: CarWriteDTO, car_id: str | None = None) -> SaveCarRequest:
        """
        Builds a save request from a request body.

        Args:
            dto: Request body
            car_id: Path id for create-or-update at a known id, None to let
                the repository assign one

        Raises:
            ValidationError: If car_id is given and is not a UUID
        """
        return SaveCarRequest(
            car=Car(
                id=parse_car_id(car_id) if car_id is not None else None,
                make=dto.make,
                model=dto.model,
                year=dto.year,
                price=Decimal(dto.price),  # str → Decimal at boundary
            )
        )

    @staticmethod
    def to_list_request(dto: CarsListQueryDTO) -> ListCarsRequest:
        sort = None
        if dto.sort_by is not None:
            sort = Sort(field=SortField(dto.sort_by), direction=SortDirection(dto.sort_dir))

        return ListCarsRequest(
            paging=Paging(offset=dto.offset, limit=dto.limit),
            sort=sort,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Handles UUID → str and Decimal → str conversion at the boundary.
        """
        return CarResponseDTO(
            id=str(car.id),
            make=car.make,
            model=car.model,
            year=car.year,
            price=str(car.price),
        )

    @staticmethod
    def to_list_response(
        result: ListCarsResponse,
        offset: int,
        limit: int,
    ) -> CarListResponseDTO:
        """
        Converts a listing result to REST response with pagination metadata.

        Args:
            result: Domain listing result containing cars and total count
            offset: Current offset (echoed from request)
            limit: Current limit (echoed from request)
        """
        return CarListResponseDTO(
            cars=[CarMapper.to_car_response(car) for car in result.cars],
            total=result.total_count,
            offset=offset,
            limit=limit,
        )
