from __future__ import annotations

from uuid import UUID

from car_registry.domain.errors import ValidationError


def parse_car_id(car_id: str) -> UUID:
    """
    Parse a car id received from the outside world.

    Raises:
        ValidationError: If car_id is not a valid UUID format
    """
    try:
        return UUID(car_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "car_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        ) from None
