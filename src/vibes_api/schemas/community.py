from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    SnakeAuditResponse,
    UpdatePayload,
    reject_none,
)

ImageType = Literal["Intermediate", "Beginner", "Advanced"]
ImageSellType = Literal["free", "premium"]


class CommunityDesignCreate(CreatePayload):
    categories_id: int = Field(gt=0)
    title: str = Field(min_length=1, max_length=300)
    image_type: ImageType
    image_sell_type: ImageSellType
    image: str | None = Field(default=None, max_length=500)
    sub_title: str | None = Field(default=None, max_length=500)
    hash_tag: list[str] = Field(default_factory=list)
    design_json_data: str | None = None
    permissions: list[dict[str, Any]] = Field(default_factory=list)


class CommunityDesignUpdate(UpdatePayload):
    categories_id: int | None = Field(default=None, gt=0)
    title: str | None = Field(default=None, min_length=1, max_length=300)
    image_type: ImageType | None = None
    image_sell_type: ImageSellType | None = None
    image: str | None = Field(default=None, max_length=500)
    sub_title: str | None = Field(default=None, max_length=500)
    hash_tag: list[str] | None = None
    design_json_data: str | None = None
    permissions: list[dict[str, Any]] | None = None

    reject_null_fields = field_validator(
        "categories_id",
        "title",
        "image_type",
        "image_sell_type",
        "hash_tag",
        "permissions",
        mode="before",
    )(reject_none)


class CommunityDesignResponse(SnakeAuditResponse):
    community_designs_id: int
    categories_id: int
    title: str
    image_type: str
    image_sell_type: str
    image: str | None = None
    sub_title: str | None = None
    hash_tag: list[str] = []
    design_json_data: str | None = None
    permissions: list[dict[str, Any]] = []
    likes: int = 0
    views: int = 0
    share: int = 0
    remixes: int = 0
    downloads: int = 0


class CommunityDesignLikeCreate(CreatePayload):
    community_designs_id: int = Field(gt=0)


class CommunityDesignLikeUpdate(UpdatePayload):
    community_designs_id: int | None = Field(default=None, gt=0)

    reject_null_design = field_validator("community_designs_id", mode="before")(reject_none)


class CommunityDesignLikeResponse(SnakeAuditResponse):
    community_designs_likes_id: int
    community_designs_id: int
