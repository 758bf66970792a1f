"""Generic envelope and payload schemas for reusable CRUD endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Success response: ``{status, message, data}``."""

    status: int
    message: str
    data: T


class PaginatedEnvelope(BaseModel, Generic[T]):
    """Paginated list response.

    ``pagination`` uses one of the two key sets of
    :class:`~vibes_api.api.generic.pagination.PaginationStyle`.
    """

    status: int
    message: str
    data: list[T]
    pagination: dict[str, Any]


class ErrorEnvelope(BaseModel):
    """Standard error response."""

    status: int
    message: str
    data: Any = None


# --- Audit fields, one mixin per JSON key convention ---


class _ResponseBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SnakeAuditResponse(_ResponseBase):
    status: bool
    created_by: int | None
    updated_by: int | None
    created_at: datetime
    updated_at: datetime


class CamelAuditResponse(_ResponseBase):
    status: bool
    created_by: int | None = Field(alias="createdBy")
    updated_by: int | None = Field(alias="updatedBy")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class PascalAuditResponse(_ResponseBase):
    status: bool = Field(alias="Status")
    created_by: int | None = Field(alias="CreateBy")
    updated_by: int | None = Field(alias="UpdatedBy")
    created_at: datetime = Field(alias="CreateAt")
    updated_at: datetime = Field(alias="UpdatedAt")


# --- Request payload bases ---


def reject_none(cls, value: object, info) -> object:  # noqa: ANN401
    """Reject explicit null for non-nullable fields.

    Shared body for ``field_validator(..., mode="before")`` on update payloads.
    """
    if value is None:
        msg = f"{info.field_name} cannot be null"
        raise ValueError(msg)
    return value


class CreatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: bool = True


class PatchPayload(BaseModel):
    """Partial update; at least one field must be supplied."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: bool | None = None

    @model_validator(mode="after")
    def require_changes(self) -> "PatchPayload":
        if not self.model_fields_set - {"id"}:
            raise ValueError("At least one field (besides id) must be provided for update")
        return self

    reject_null_status = field_validator("status", mode="before")(reject_none)


class UpdatePayload(PatchPayload):
    """Partial update addressed by an ``id`` carried in the body."""

    id: int = Field(gt=0)


