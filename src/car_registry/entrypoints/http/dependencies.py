"""
Dependency injection for FastAPI routes.

Database sessions are per-request, never cached. Each request gets a fresh
repository and use case bound to its own session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from car_registry.adapters.sql_car_repository import SqlCarRepository
from car_registry.infra.db.session import get_session
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.count_cars import CountCars
from car_registry.use_cases.delete_car import DeleteCar
from car_registry.use_cases.get_car_by_id import GetCarById
from car_registry.use_cases.list_cars import ListCars
from car_registry.use_cases.save_car import SaveCar


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits when the request succeeds, rolls
    back on any exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_car_repository(db: Session = Depends(get_db)) -> CarRepository:
    return SqlCarRepository(session=db)


def get_save_car_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> SaveCar:
    return SaveCar(car_repository=repository)


def get_get_car_by_id_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> GetCarById:
    return GetCarById(car_repository=repository)


def get_list_cars_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> ListCars:
    return ListCars(car_repository=repository)


def get_count_cars_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> CountCars:
    return CountCars(car_repository=repository)


def get_delete_car_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> DeleteCar:
    return DeleteCar(car_repository=repository)
