from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PRICE_PATTERN = r"^\d{1,10}(\.\d{1,2})?$"


class CarResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: str


class CarWriteDTO(BaseModel):
    """Body for creating or replacing a car."""

    make: str = Field(
        min_length=1,
        max_length=50,
        description="Manufacturer",
        examples=["Toyota"],
    )
    model: str = Field(
        min_length=1,
        max_length=50,
        description="Model name",
        examples=["Corolla"],
    )
    year: int = Field(
        description="Model year",
        examples=[2020],
        ge=1900,
        le=2100,
    )
    price: str = Field(
        description="Price (decimal as string, up to 2 decimal places)",
        examples=["25000.00"],
        pattern=PRICE_PATTERN,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Corolla",
                "year": 2020,
                "price": "25000.00",
            }
        }
    )


class CarsListQueryDTO(BaseModel):
    """Query parameters for listing cars."""

    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )
    sort_by: Literal["make", "model", "year", "price"] | None = Field(
        default=None,
        description="Field to sort by (creation order when omitted)",
        examples=["price"],
    )
    sort_dir: Literal["asc", "desc"] = Field(
        default="asc",
        description="Sort direction, ignored without sort_by",
        examples=["desc"],
    )


class CarListResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int
    offset: int
    limit: int


class CarCountResponseDTO(BaseModel):
    count: int
