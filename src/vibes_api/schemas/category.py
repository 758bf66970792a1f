from __future__ import annotations

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    SnakeAuditResponse,
    UpdatePayload,
    reject_none,
)


class CategoryCreate(CreatePayload):
    category_name: str = Field(min_length=1, max_length=200)
    emozi: str | None = Field(default=None, max_length=50)


class CategoryUpdate(UpdatePayload):
    category_name: str | None = Field(default=None, min_length=1, max_length=200)
    emozi: str | None = Field(default=None, max_length=50)

    reject_null_name = field_validator("category_name", mode="before")(reject_none)


class CategoryResponse(SnakeAuditResponse):
    category_id: int
    category_name: str
    emozi: str | None = None
