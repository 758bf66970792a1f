"""Global search entries keep the PascalCase JSON keys of the search index."""

from __future__ import annotations

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    PascalAuditResponse,
    UpdatePayload,
    reject_none,
)


class GlobalSearchCreate(CreatePayload):
    status: bool = Field(default=True, alias="Status")
    page_name: str = Field(min_length=1, max_length=200, alias="Page_Name")
    page_routes: str = Field(min_length=1, max_length=500, alias="Page_Routes")
    page_content: str = Field(min_length=1, alias="Page_content")


class GlobalSearchUpdate(UpdatePayload):
    id: int = Field(gt=0, alias="GlobalSearch_id")
    status: bool | None = Field(default=None, alias="Status")
    page_name: str | None = Field(default=None, min_length=1, max_length=200, alias="Page_Name")
    page_routes: str | None = Field(
        default=None, min_length=1, max_length=500, alias="Page_Routes"
    )
    page_content: str | None = Field(default=None, min_length=1, alias="Page_content")

    reject_null_fields = field_validator(
        "page_name", "page_routes", "page_content", mode="before"
    )(reject_none)


class GlobalSearchResponse(PascalAuditResponse):
    global_search_id: int = Field(alias="GlobalSearch_id")
    page_name: str = Field(alias="Page_Name")
    page_routes: str = Field(alias="Page_Routes")
    page_content: str = Field(alias="Page_content")
