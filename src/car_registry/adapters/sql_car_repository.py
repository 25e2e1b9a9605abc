"""SQLAlchemy implementation of CarRepository."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from car_registry.domain.car import Car, Paging, Sort, SortDirection, SortField
from car_registry.infra.db.models.car import CarRow
from car_registry.ports.car_repository import CarPage, CarRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SortField.MAKE: CarRow.make,
    SortField.MODEL: CarRow.model,
    SortField.YEAR: CarRow.year,
    SortField.PRICE: CarRow.price,
}


class SqlCarRepository(CarRepository):
    """
    SQLAlchemy implementation of CarRepository.

    - Works against any SQLAlchemy dialect (PostgreSQL in production)
    - Flushes writes but never commits; the session owner decides
    - Returns total_count via COUNT(*) query
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def save(self, car: Car) -> Car:
        """
        Insert or update a car.

        Uses Session.get() so an already-loaded row is reused from the
        identity map instead of issuing another SELECT.
        """
        row = self._session.get(CarRow, car.id) if car.id is not None else None

        if row is None:
            row = CarRow(
                id=car.id or uuid.uuid4(),
                make=car.make,
                model=car.model,
                year=car.year,
                price=car.price,
            )
            self._session.add(row)
            action = "inserted"
        else:
            row.make = car.make
            row.model = car.model
            row.year = car.year
            row.price = car.price
            action = "updated"

        # Flush so constraint violations surface here and timestamps are set
        self._session.flush()

        logger.debug("Car %s", action, extra={"car_id": str(row.id)})
        return self._to_domain(row)

    def find_by_id(self, car_id: UUID) -> Car | None:
        row = self._session.get(CarRow, car_id)
        return self._to_domain(row) if row else None

    def find_all(self, sort: Sort | None = None) -> list[Car]:
        query = self._apply_sort(select(CarRow), sort)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def find_all_by_id(self, car_ids: Iterable[UUID]) -> list[Car]:
        ids = list(car_ids)
        if not ids:
            return []

        query = self._apply_sort(select(CarRow).where(CarRow.id.in_(ids)), None)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def find_page(self, paging: Paging, sort: Sort | None = None) -> CarPage:
        """
        Return one page of cars.

        Executes two queries:
        1. COUNT(*) to get total cars (before paging)
        2. SELECT with ORDER BY/OFFSET/LIMIT to get the page

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        total_count = self.count()

        query = self._apply_sort(select(CarRow), sort)
        query = query.offset(paging.offset).limit(paging.limit)

        rows = self._session.execute(query).scalars().all()
        cars = [self._to_domain(row) for row in rows]

        return CarPage(cars=cars, total_count=total_count)

    def count(self) -> int:
        count_query = select(func.count()).select_from(CarRow)
        return self._session.execute(count_query).scalar() or 0

    def exists_by_id(self, car_id: UUID) -> bool:
        query = select(CarRow.id).where(CarRow.id == car_id).limit(1)
        return self._session.execute(query).scalar_one_or_none() is not None

    def delete_by_id(self, car_id: UUID) -> None:
        row = self._session.get(CarRow, car_id)
        if row is None:
            return

        self._session.delete(row)
        self._session.flush()
        logger.debug("Car deleted", extra={"car_id": str(car_id)})

    def delete_all_by_id(self, car_ids: Iterable[UUID]) -> None:
        ids = list(car_ids)
        if not ids:
            return

        # "evaluate" also drops matching rows from the identity map
        query = delete(CarRow).where(CarRow.id.in_(ids))
        self._session.execute(query.execution_options(synchronize_session="evaluate"))
        logger.debug("Cars deleted", extra={"requested": len(ids)})

    def delete_all(self) -> int:
        result = self._session.execute(
            delete(CarRow).execution_options(synchronize_session="evaluate")
        )
        removed = result.rowcount or 0
        logger.debug("All cars deleted", extra={"removed": removed})
        return removed

    def flush(self) -> None:
        self._session.flush()

    def _apply_sort(self, query: Select[tuple[CarRow]], sort: Sort | None) -> Select[tuple[CarRow]]:
        """
        Apply ORDER BY to a query.

        Without a Sort, cars come back in creation order. With one, the
        requested column is followed by id so pages never overlap.
        """
        if sort is None:
            return query.order_by(CarRow.created_at.asc(), CarRow.id.asc())

        column = _SORT_COLUMNS[sort.field]
        if sort.direction is SortDirection.DESC:
            return query.order_by(column.desc(), CarRow.id.desc())
        return query.order_by(column.asc(), CarRow.id.asc())

    def _to_domain(self, row: CarRow) -> Car:
        """Convert database model (CarRow) to domain entity (Car)."""
        return Car(
            id=row.id,
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
        )
