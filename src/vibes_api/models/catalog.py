"""Priced catalogue entries offered when planning an event."""

from __future__ import annotations

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class Food(AuditedBase):
    __tablename__ = "food"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    food_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    food_name: Mapped[str] = mapped_column(String(200), nullable=False)
    food_price: Mapped[float] = mapped_column(Float, nullable=False)
    food_color: Mapped[str | None] = mapped_column(String(50), default=None)
    food_type: Mapped[str | None] = mapped_column(String(100), default=None)
    brand_name: Mapped[str | None] = mapped_column(String(200), default=None)


class Drinks(AuditedBase):
    __tablename__ = "drinks"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    drinks_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    drinks_name: Mapped[str] = mapped_column(String(200), nullable=False)
    drinks_price: Mapped[float] = mapped_column(Float, nullable=False)
    drinks_color: Mapped[str | None] = mapped_column(String(50), default=None)
    brand_name: Mapped[str | None] = mapped_column(String(200), default=None)


class Decorations(AuditedBase):
    __tablename__ = "decorations"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    decorations_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    decorations_name: Mapped[str] = mapped_column(String(200), nullable=False)
    decorations_price: Mapped[float] = mapped_column(Float, nullable=False)
    decorations_type: Mapped[str | None] = mapped_column(String(100), default=None)
    brand_name: Mapped[str | None] = mapped_column(String(200), default=None)


class Entertainment(AuditedBase):
    __tablename__ = "entertainment"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    entertainment_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    entertainment_name: Mapped[str] = mapped_column(String(200), nullable=False)
    entertainment_price: Mapped[float] = mapped_column(Float, nullable=False)
    entertainment_type: Mapped[str | None] = mapped_column(String(100), default=None)
    brand_name: Mapped[str | None] = mapped_column(String(200), default=None)
