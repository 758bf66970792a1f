"""Schemas of the admin lookup tables.

Each lookup is a single required name plus an optional emoji; the update
variants accept any subset of those.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from vibes_api.schemas.generic import (
    CreatePayload,
    SnakeAuditResponse,
    UpdatePayload,
    reject_none,
)

# --- Event amenities ---


class EventAmenityCreate(CreatePayload):
    name: str = Field(min_length=1, max_length=100)
    image: str | None = Field(default=None, max_length=500)
    emoji: str | None = Field(default=None, max_length=10)


class EventAmenityUpdate(UpdatePayload):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    image: str | None = Field(default=None, max_length=500)
    emoji: str | None = Field(default=None, max_length=10)

    reject_null_name = field_validator("name", mode="before")(reject_none)


class EventAmenityResponse(SnakeAuditResponse):
    event_amenities_id: int
    name: str
    image: str | None = None
    emoji: str | None = None


# --- Payment methods ---


class PaymentMethodCreate(CreatePayload):
    payment_method: str = Field(min_length=1, max_length=100)
    emoji: str | None = Field(default=None, max_length=10)


class PaymentMethodUpdate(UpdatePayload):
    payment_method: str | None = Field(default=None, min_length=1, max_length=100)
    emoji: str | None = Field(default=None, max_length=10)

    reject_null_name = field_validator("payment_method", mode="before")(reject_none)


class PaymentMethodResponse(SnakeAuditResponse):
    payment_methods_id: int
    payment_method: str
    emoji: str | None = None


# --- Bank names ---


class BankNameCreate(CreatePayload):
    bank_name: str = Field(min_length=1, max_length=100)
    emoji: str | None = Field(default=None, max_length=10)


class BankNameUpdate(UpdatePayload):
    bank_name: str | None = Field(default=None, min_length=1, max_length=100)
    emoji: str | None = Field(default=None, max_length=10)

    reject_null_name = field_validator("bank_name", mode="before")(reject_none)


class BankNameResponse(SnakeAuditResponse):
    bank_name_id: int
    bank_name: str
    emoji: str | None = None


# --- Ticket types ---


class TicketTypeCreate(CreatePayload):
    ticket_type: str = Field(min_length=1, max_length=100)
    emoji: str | None = Field(default=None, max_length=10)


class TicketTypeUpdate(UpdatePayload):
    ticket_type: str | None = Field(default=None, min_length=1, max_length=100)
    emoji: str | None = Field(default=None, max_length=10)

    reject_null_name = field_validator("ticket_type", mode="before")(reject_none)


class TicketTypeResponse(SnakeAuditResponse):
    ticket_type_id: int
    ticket_type: str
    emoji: str | None = None


# --- Event themes ---


class EventThemeCreate(CreatePayload):
    event_theme_name: str = Field(min_length=1, max_length=200)


class EventThemeUpdate(UpdatePayload):
    event_theme_name: str | None = Field(default=None, min_length=1, max_length=200)

    reject_null_name = field_validator("event_theme_name", mode="before")(reject_none)


class EventThemeResponse(SnakeAuditResponse):
    event_theme_id: int
    event_theme_name: str


# --- Dress codes ---


class DressCodeCreate(CreatePayload):
    dress_code_name: str = Field(min_length=1, max_length=200)


class DressCodeUpdate(UpdatePayload):
    dress_code_name: str | None = Field(default=None, min_length=1, max_length=200)

    reject_null_name = field_validator("dress_code_name", mode="before")(reject_none)


class DressCodeResponse(SnakeAuditResponse):
    dress_code_id: int
    dress_code_name: str
