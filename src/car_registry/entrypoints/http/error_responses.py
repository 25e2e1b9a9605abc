"""REST API error response models.

Documents the body every exception handler returns, so OpenAPI consumers
see the same shape for 404, 422 and 500 responses.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One failing field inside a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "year",
                "message": "Must be between 1900 and 2100",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    `errors` is present only for validation failures that name fields.

    Examples:
        {"detail": "Car with identifier '...' not found", "code": "NOT_FOUND"}

        {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [{"field": "car_id", "message": "...", "code": "INVALID_UUID"}]
        }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Car with identifier '550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "year",
                            "message": "Must be between 1900 and 2100",
                            "code": "OUT_OF_RANGE",
                        },
                        {
                            "field": "price",
                            "message": "Must be >= 0",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
