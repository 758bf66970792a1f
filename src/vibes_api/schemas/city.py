from __future__ import annotations

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    SnakeAuditResponse,
    UpdatePayload,
    reject_none,
)


class CityCreate(CreatePayload):
    name: str = Field(min_length=1, max_length=100)
    state_id: int = Field(gt=0)
    country_id: int = Field(gt=0)


class CityUpdate(UpdatePayload):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    state_id: int | None = Field(default=None, gt=0)
    country_id: int | None = Field(default=None, gt=0)

    reject_null_fields = field_validator("name", "state_id", "country_id", mode="before")(
        reject_none
    )


class CityResponse(SnakeAuditResponse):
    city_id: int
    name: str
    state_id: int
    country_id: int
