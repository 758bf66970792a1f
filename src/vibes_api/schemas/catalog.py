from __future__ import annotations

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    SnakeAuditResponse,
    UpdatePayload,
    reject_none,
)


class FoodCreate(CreatePayload):
    food_name: str = Field(min_length=1, max_length=200)
    food_price: float = Field(ge=0)
    food_color: str | None = Field(default=None, max_length=50)
    food_type: str | None = Field(default=None, max_length=100)
    brand_name: str | None = Field(default=None, max_length=200)


class FoodUpdate(UpdatePayload):
    food_name: str | None = Field(default=None, min_length=1, max_length=200)
    food_price: float | None = Field(default=None, ge=0)
    food_color: str | None = Field(default=None, max_length=50)
    food_type: str | None = Field(default=None, max_length=100)
    brand_name: str | None = Field(default=None, max_length=200)

    reject_null_fields = field_validator("food_name", "food_price", mode="before")(reject_none)


class FoodResponse(SnakeAuditResponse):
    food_id: int
    food_name: str
    food_price: float
    food_color: str | None = None
    food_type: str | None = None
    brand_name: str | None = None


class DrinksCreate(CreatePayload):
    drinks_name: str = Field(min_length=1, max_length=200)
    drinks_price: float = Field(ge=0)
    drinks_color: str | None = Field(default=None, max_length=50)
    brand_name: str | None = Field(default=None, max_length=200)


class DrinksUpdate(UpdatePayload):
    drinks_name: str | None = Field(default=None, min_length=1, max_length=200)
    drinks_price: float | None = Field(default=None, ge=0)
    drinks_color: str | None = Field(default=None, max_length=50)
    brand_name: str | None = Field(default=None, max_length=200)

    reject_null_fields = field_validator("drinks_name", "drinks_price", mode="before")(
        reject_none
    )


class DrinksResponse(SnakeAuditResponse):
    drinks_id: int
    drinks_name: str
    drinks_price: float
    drinks_color: str | None = None
    brand_name: str | None = None


class DecorationsCreate(CreatePayload):
    decorations_name: str = Field(min_length=1, max_length=200)
    decorations_price: float = Field(ge=0)
    decorations_type: str | None = Field(default=None, max_length=100)
    brand_name: str | None = Field(default=None, max_length=200)


class DecorationsUpdate(UpdatePayload):
    decorations_name: str | None = Field(default=None, min_length=1, max_length=200)
    decorations_price: float | None = Field(default=None, ge=0)
    decorations_type: str | None = Field(default=None, max_length=100)
    brand_name: str | None = Field(default=None, max_length=200)

    reject_null_fields = field_validator(
        "decorations_name", "decorations_price", mode="before"
    )(reject_none)


class DecorationsResponse(SnakeAuditResponse):
    decorations_id: int
    decorations_name: str
    decorations_price: float
    decorations_type: str | None = None
    brand_name: str | None = None


class EntertainmentCreate(CreatePayload):
    entertainment_name: str = Field(min_length=1, max_length=200)
    entertainment_price: float = Field(ge=0)
    entertainment_type: str | None = Field(default=None, max_length=100)
    brand_name: str | None = Field(default=None, max_length=200)


class EntertainmentUpdate(UpdatePayload):
    entertainment_name: str | None = Field(default=None, min_length=1, max_length=200)
    entertainment_price: float | None = Field(default=None, ge=0)
    entertainment_type: str | None = Field(default=None, max_length=100)
    brand_name: str | None = Field(default=None, max_length=200)

    reject_null_fields = field_validator(
        "entertainment_name", "entertainment_price", mode="before"
    )(reject_none)


class EntertainmentResponse(SnakeAuditResponse):
    entertainment_id: int
    entertainment_name: str
    entertainment_price: float
    entertainment_type: str | None = None
    brand_name: str | None = None
