from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from uuid import UUID

from car_registry.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class CarValidationError(ValidationError):
    """Raised when a car violates one or more entity rules."""

    pass


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class SortValidationError(ValidationError):
    """Raised when sort parameters are invalid."""

    pass


# ==============================================================================
# Constants
# ==============================================================================

MAKE_MAX_LENGTH = 50
MODEL_MAX_LENGTH = 50
YEAR_MIN = 1900
YEAR_MAX = 2100

# Fits NUMERIC(12, 2)
PRICE_MAX = Decimal("9999999999.99")
PRICE_DECIMAL_PLACES = 2
PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)

MAX_PAGE_LIMIT = 200


@dataclass(frozen=True)
class Car:
    id: UUID | None
    make: str
    model: str
    year: int
    price: Decimal

    def validate(self) -> None:
        """
        Validate entity rules, collecting every violation.

        Raises:
            CarValidationError: If one or more fields are invalid
        """
        errors: list[dict[str, str]] = []

        if not self.make or not self.make.strip():
            errors.append(_field_error("make", "Must not be blank", "REQUIRED"))
        elif len(self.make) > MAKE_MAX_LENGTH:
            errors.append(
                _field_error("make", f"Must be at most {MAKE_MAX_LENGTH} characters", "TOO_LONG")
            )

        if not self.model or not self.model.strip():
            errors.append(_field_error("model", "Must not be blank", "REQUIRED"))
        elif len(self.model) > MODEL_MAX_LENGTH:
            errors.append(
                _field_error("model", f"Must be at most {MODEL_MAX_LENGTH} characters", "TOO_LONG")
            )

        if not YEAR_MIN <= self.year <= YEAR_MAX:
            errors.append(
                _field_error("year", f"Must be between {YEAR_MIN} and {YEAR_MAX}", "OUT_OF_RANGE")
            )

        # Guardrail: no floats past the boundary
        if not isinstance(self.price, Decimal) or not self.price.is_finite():
            errors.append(_field_error("price", "Must be a Decimal", "INVALID_DECIMAL"))
        elif not 0 <= self.price <= PRICE_MAX:
            errors.append(
                _field_error("price", f"Must be between 0 and {PRICE_MAX}", "OUT_OF_RANGE")
            )
        elif self.price != self.price.quantize(PRICE_QUANTUM):
            errors.append(
                _field_error(
                    "price",
                    f"Must have at most {PRICE_DECIMAL_PLACES} decimal places",
                    "TOO_PRECISE",
                )
            )

        if errors:
            raise CarValidationError(errors=errors)


class SortField(str, Enum):
    MAKE = "make"
    MODEL = "model"
    YEAR = "year"
    PRICE = "price"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class Sort:
    field: SortField
    direction: SortDirection = SortDirection.ASC

    def validate(self) -> None:
        """
        Validate sort parameters.

        Raises:
            SortValidationError: If field or direction is not supported
        """
        if not isinstance(self.field, SortField):
            raise SortValidationError(
                f"sort field must be one of {[f.value for f in SortField]}"
            )
        if not isinstance(self.direction, SortDirection):
            raise SortValidationError("sort direction must be 'asc' or 'desc'")


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_LIMIT:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_LIMIT}")


def _field_error(field: str, message: str, code: str) -> dict[str, str]:
    return {"field": field, "message": message, "code": code}
