from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class GlobalSearchEntry(AuditedBase):
    """A navigable page indexed for the site-wide search box."""

    __tablename__ = "global_search"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    global_search_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    page_name: Mapped[str] = mapped_column(String(200), nullable=False)
    page_routes: Mapped[str] = mapped_column(String(500), nullable=False)
    page_content: Mapped[str] = mapped_column(Text, nullable=False)
