from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    PatchPayload,
    SnakeAuditResponse,
    reject_none,
)

ReviewSource = Literal["Admin", "User"]


class ClientReviewCreate(CreatePayload):
    user_name: str | None = Field(default=None, max_length=200, alias="userName")
    image: str | None = Field(default=None, max_length=500)
    title: str | None = Field(default=None, max_length=300)
    description: str | None = Field(default=None, max_length=5000)
    location: str | None = Field(default=None, max_length=200)
    rating: float = Field(default=0, ge=0, le=5)
    through: ReviewSource = "User"
    is_show_on_website: bool = Field(default=False, alias="isShowOnWebsite")


class ClientReviewUpdate(PatchPayload):
    """Review update; the target id comes from the URL path."""

    user_name: str | None = Field(default=None, max_length=200, alias="userName")
    image: str | None = Field(default=None, max_length=500)
    title: str | None = Field(default=None, max_length=300)
    description: str | None = Field(default=None, max_length=5000)
    location: str | None = Field(default=None, max_length=200)
    rating: float | None = Field(default=None, ge=0, le=5)
    through: ReviewSource | None = None
    is_show_on_website: bool | None = Field(default=None, alias="isShowOnWebsite")

    reject_null_fields = field_validator(
        "rating", "through", "is_show_on_website", mode="before"
    )(reject_none)


class ClientReviewResponse(SnakeAuditResponse):
    client_review_id: int
    user_name: str | None = Field(default=None, alias="userName")
    image: str | None = None
    title: str | None = None
    description: str | None = None
    location: str | None = None
    rating: float
    through: str
    is_show_on_website: bool = Field(alias="isShowOnWebsite")
