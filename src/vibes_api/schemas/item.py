from __future__ import annotations

from pydantic import Field

from vibes_api.schemas.generic import CamelAuditResponse, CreatePayload, UpdatePayload


class ItemCategoryCreate(CreatePayload):
    categorytxt: str | None = Field(default=None, max_length=200)
    emozi: str | None = Field(default=None, max_length=50)


class ItemCategoryUpdate(UpdatePayload):
    categorytxt: str | None = Field(default=None, max_length=200)
    emozi: str | None = Field(default=None, max_length=50)


class ItemCategoryResponse(CamelAuditResponse):
    item_category_id: int
    categorytxt: str | None = None
    emozi: str | None = None


class ItemCreate(CreatePayload):
    item_category_id: int | None = Field(default=None, gt=0, alias="item_Category_id")
    item_name: str | None = Field(default=None, max_length=200)
    item_price: float | None = Field(default=None, ge=0)
    item_brand: str | None = Field(default=None, max_length=200)
    item_color: str | None = Field(default=None, max_length=50)


class ItemUpdate(UpdatePayload):
    item_category_id: int | None = Field(default=None, gt=0, alias="item_Category_id")
    item_name: str | None = Field(default=None, max_length=200)
    item_price: float | None = Field(default=None, ge=0)
    item_brand: str | None = Field(default=None, max_length=200)
    item_color: str | None = Field(default=None, max_length=50)


class ItemResponse(CamelAuditResponse):
    items_id: int
    item_category_id: int | None = Field(default=None, alias="item_Category_id")
    item_name: str | None = None
    item_price: float | None = None
    item_brand: str | None = None
    item_color: str | None = None
