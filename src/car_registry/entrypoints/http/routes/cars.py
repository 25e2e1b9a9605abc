from fastapi import APIRouter, Depends, Response, status

from car_registry.entrypoints.http.dependencies import (
    get_count_cars_use_case,
    get_delete_car_use_case,
    get_get_car_by_id_use_case,
    get_list_cars_use_case,
    get_save_car_use_case,
)
from car_registry.entrypoints.http.dtos.car import (
    CarCountResponseDTO,
    CarListResponseDTO,
    CarResponseDTO,
    CarsListQueryDTO,
    CarWriteDTO,
)
from car_registry.entrypoints.http.error_responses import ErrorResponse
from car_registry.entrypoints.http.mappers.car_mapper import CarMapper
from car_registry.use_cases.count_cars import CountCars
from car_registry.use_cases.delete_car import DeleteCar, DeleteCarRequest
from car_registry.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from car_registry.use_cases.list_cars import ListCars
from car_registry.use_cases.save_car import SaveCar


router = APIRouter(tags=["Cars"])

_NOT_FOUND = {404: {"description": "Car not found", "model": ErrorResponse}}
_INVALID = {422: {"description": "Validation error", "model": ErrorResponse}}


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a car",
    description="""
    Store a new car. The server assigns its UUID.

    Prices are strings with up to 2 decimal places (e.g. "25000.00").
    """,
    responses={**_INVALID},
)
def create_car(
    payload: CarWriteDTO,
    use_case: SaveCar = Depends(get_save_car_use_case),
) -> CarResponseDTO:
    """Create endpoint following parse → execute → map → return pattern."""
    request = CarMapper.to_save_request(payload)
    result = use_case.execute(request)
    return CarMapper.to_car_response(result.car)


@router.get(
    "/cars",
    response_model=CarListResponseDTO,
    summary="List cars",
    description="""
    List stored cars with pagination and optional sorting.

    ## Pagination
    - Default limit: 20
    - Max limit: 200
    - `total` counts every stored car

    ## Sorting
    - `sort_by`: make, model, year or price
    - `sort_dir`: asc (default) or desc
    - Without `sort_by`, cars come back in creation order

    ## Example
    ```
    GET /v1/cars?sort_by=price&sort_dir=desc&limit=10
    ```
    """,
    responses={**_INVALID},
)
def list_cars(
    query: CarsListQueryDTO = Depends(),
    use_case: ListCars = Depends(get_list_cars_use_case),
) -> CarListResponseDTO:
    request = CarMapper.to_list_request(query)
    result = use_case.execute(request)
    return CarMapper.to_list_response(result=result, offset=query.offset, limit=query.limit)


@router.get(
    "/cars/count",
    response_model=CarCountResponseDTO,
    summary="Count cars",
)
def count_cars(use_case: CountCars = Depends(get_count_cars_use_case)) -> CarCountResponseDTO:
    return CarCountResponseDTO(count=use_case.execute())


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get a car",
    responses={**_NOT_FOUND, **_INVALID},
)
def get_car(
    car_id: str,
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    return CarMapper.to_car_response(result.car)


@router.put(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Create or update a car",
    description="""
    Store a car under the given UUID.

    Returns 201 when no car had that id and 200 when an existing car was replaced.
    """,
    responses={201: {"description": "Car created", "model": CarResponseDTO}, **_INVALID},
)
def put_car(
    car_id: str,
    payload: CarWriteDTO,
    response: Response,
    use_case: SaveCar = Depends(get_save_car_use_case),
) -> CarResponseDTO:
    request = CarMapper.to_save_request(payload, car_id=car_id)
    result = use_case.execute(request)

    if result.created:
        response.status_code = status.HTTP_201_CREATED

    return CarMapper.to_car_response(result.car)


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a car",
    responses={**_NOT_FOUND, **_INVALID},
)
def delete_car(
    car_id: str,
    use_case: DeleteCar = Depends(get_delete_car_use_case),
) -> Response:
    use_case.execute(DeleteCarRequest(car_id=car_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
