from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from vibes_api.schemas.generic import (
    CamelAuditResponse,
    CreatePayload,
    SnakeAuditResponse,
    UpdatePayload,
    reject_none,
)

# --- Event entry tickets ---


class EventEntryTicketCreate(CreatePayload):
    event_id: int = Field(gt=0)
    title: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0)
    total_seats: int = Field(ge=1)
    tag: str | None = Field(default=None, max_length=100)
    perks: list[str] = Field(default_factory=list)


class EventEntryTicketUpdate(UpdatePayload):
    event_id: int | None = Field(default=None, gt=0)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    price: float | None = Field(default=None, ge=0)
    total_seats: int | None = Field(default=None, ge=1)
    tag: str | None = Field(default=None, max_length=100)
    perks: list[str] | None = None

    reject_null_fields = field_validator(
        "event_id", "title", "price", "total_seats", "perks", mode="before"
    )(reject_none)


class EventEntryTicketResponse(CamelAuditResponse):
    event_entry_tickets_id: int
    event_id: int
    title: str
    price: float
    total_seats: int
    tag: str | None = None
    perks: list[str] = []


# --- Event setup requirements ---


class EventSetupRequirementCreate(CreatePayload):
    name: str | None = Field(default=None, max_length=200)
    quantity: int | None = Field(default=None, ge=1)
    image: str | None = Field(default=None, max_length=500)
    emozi: str | None = Field(default=None, max_length=50)


class EventSetupRequirementUpdate(UpdatePayload):
    name: str | None = Field(default=None, max_length=200)
    quantity: int | None = Field(default=None, ge=1)
    image: str | None = Field(default=None, max_length=500)
    emozi: str | None = Field(default=None, max_length=50)


class EventSetupRequirementResponse(CamelAuditResponse):
    setup_requirements_id: int
    name: str | None = None
    quantity: int | None = None
    image: str | None = None
    emozi: str | None = None


# --- Support tickets ---


class TicketDetail(BaseModel):
    """One priced ticket tier of an event."""

    ticket_type_id: int = Field(gt=0)
    price: float = Field(ge=0)


class TicketCreate(CreatePayload):
    event_id: int | None = Field(default=None, gt=0)
    ticket_type_id: int | None = Field(default=None, gt=0)
    max_capacity: int | None = Field(default=None, ge=1)
    ticket_details: list[TicketDetail] = Field(default_factory=list)
    ticket_query: str | None = Field(default=None, max_length=2000)
    reply: str = Field(default="", max_length=2000)


class TicketUpdate(UpdatePayload):
    event_id: int | None = Field(default=None, gt=0)
    ticket_type_id: int | None = Field(default=None, gt=0)
    max_capacity: int | None = Field(default=None, ge=1)
    ticket_details: list[TicketDetail] | None = None
    ticket_query: str | None = Field(default=None, max_length=2000)
    reply: str | None = Field(default=None, max_length=2000)

    reject_null_fields = field_validator("ticket_details", "reply", mode="before")(reject_none)


class TicketResponse(SnakeAuditResponse):
    ticket_id: int
    event_id: int | None = None
    ticket_type_id: int | None = None
    max_capacity: int | None = None
    ticket_details: list[TicketDetail] = []
    ticket_query: str | None = None
    reply: str = ""
