from __future__ import annotations

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class ItemCategory(AuditedBase):
    __tablename__ = "item_categories"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    item_category_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    categorytxt: Mapped[str | None] = mapped_column(String(200), default=None)
    emozi: Mapped[str | None] = mapped_column(String(50), default=None)


class Item(AuditedBase):
    __tablename__ = "items"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    items_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    item_category_id: Mapped[int | None] = mapped_column(Integer, default=None, index=True)
    item_name: Mapped[str | None] = mapped_column(String(200), default=None)
    item_price: Mapped[float | None] = mapped_column(Float, default=None)
    item_brand: Mapped[str | None] = mapped_column(String(200), default=None)
    item_color: Mapped[str | None] = mapped_column(String(50), default=None)
