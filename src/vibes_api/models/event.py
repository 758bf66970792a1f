from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class EventEntryTicket(AuditedBase):
    __tablename__ = "event_entry_tickets"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    event_entry_tickets_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    event_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    tag: Mapped[str | None] = mapped_column(String(100), default=None)
    perks: Mapped[list[Any]] = mapped_column(JSON, default_factory=list)


class EventSetupRequirement(AuditedBase):
    __tablename__ = "event_setup_requirements"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    setup_requirements_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    name: Mapped[str | None] = mapped_column(String(200), default=None)
    quantity: Mapped[int | None] = mapped_column(Integer, default=None)
    image: Mapped[str | None] = mapped_column(String(500), default=None)
    emozi: Mapped[str | None] = mapped_column(String(50), default=None)


class Ticket(AuditedBase):
    """Support ticket raised against an event."""

    __tablename__ = "tickets"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    ticket_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    event_id: Mapped[int | None] = mapped_column(Integer, default=None, index=True)
    ticket_type_id: Mapped[int | None] = mapped_column(Integer, default=None, index=True)
    max_capacity: Mapped[int | None] = mapped_column(Integer, default=None)
    ticket_details: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default_factory=list)
    ticket_query: Mapped[str | None] = mapped_column(Text, default=None)
    reply: Mapped[str] = mapped_column(Text, default="")
