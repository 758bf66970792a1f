"""Admin-managed lookup tables: a name, an optional emoji and the audit columns."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class EventAmenity(AuditedBase):
    __tablename__ = "event_amenities"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    event_amenities_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), default=None)
    emoji: Mapped[str | None] = mapped_column(String(10), default=None)


class PaymentMethod(AuditedBase):
    __tablename__ = "payment_methods"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    payment_methods_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    payment_method: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    emoji: Mapped[str | None] = mapped_column(String(10), default=None)


class BankName(AuditedBase):
    __tablename__ = "bank_names"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    bank_name_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    bank_name: Mapped[str] = mapped_column(String(100), nullable=False)
    emoji: Mapped[str | None] = mapped_column(String(10), default=None)


class TicketType(AuditedBase):
    __tablename__ = "ticket_types"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    ticket_type_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    ticket_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    emoji: Mapped[str | None] = mapped_column(String(10), default=None)


class EventTheme(AuditedBase):
    __tablename__ = "event_themes"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    event_theme_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    event_theme_name: Mapped[str] = mapped_column(String(200), nullable=False)


class DressCode(AuditedBase):
    __tablename__ = "dress_codes"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    dress_code_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    dress_code_name: Mapped[str] = mapped_column(String(200), nullable=False)
