from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class Category(AuditedBase):
    __tablename__ = "categories"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    category_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    category_name: Mapped[str] = mapped_column(String(200), nullable=False)
    emozi: Mapped[str | None] = mapped_column(String(50), default=None)
