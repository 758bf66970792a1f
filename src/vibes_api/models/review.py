from __future__ import annotations

from sqlalchemy import Boolean, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class ClientReview(AuditedBase):
    __tablename__ = "client_reviews"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    client_review_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    user_name: Mapped[str | None] = mapped_column(String(200), default=None)
    image: Mapped[str | None] = mapped_column(String(500), default=None)
    title: Mapped[str | None] = mapped_column(String(300), default=None)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    location: Mapped[str | None] = mapped_column(String(200), default=None)
    rating: Mapped[float] = mapped_column(Float, default=0)
    through: Mapped[str] = mapped_column(String(10), default="User")
    is_show_on_website: Mapped[bool] = mapped_column(Boolean, default=False)
