"""Tests for REST error response models."""

from car_registry.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


def test_error_detail_code_is_optional() -> None:
    detail = ErrorDetail(field="car_id", message="Must be a valid UUID format")

    assert detail.model_dump() == {
        "field": "car_id",
        "message": "Must be a valid UUID format",
        "code": None,
    }


def test_error_response_with_field_errors() -> None:
    response = ErrorResponse(
        detail="Validation failed",
        code="VALIDATION_ERROR",
        errors=[ErrorDetail(field="year", message="Must be between 1900 and 2100", code="OUT_OF_RANGE")],
    )

    assert response.errors is not None
    assert response.errors[0].field == "year"


def test_error_response_parses_handler_body() -> None:
    body = {"detail": "Car not found", "code": "NOT_FOUND"}

    response = ErrorResponse.model_validate(body)

    assert response.detail == "Car not found"
    assert response.errors is None
