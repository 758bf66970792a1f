from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class CommunityDesign(AuditedBase):
    __tablename__ = "community_designs"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    community_designs_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    categories_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    image_type: Mapped[str] = mapped_column(String(20), nullable=False)
    image_sell_type: Mapped[str] = mapped_column(String(20), nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), default=None)
    sub_title: Mapped[str | None] = mapped_column(String(500), default=None)
    hash_tag: Mapped[list[str]] = mapped_column(JSON, default_factory=list)
    design_json_data: Mapped[str | None] = mapped_column(Text, default=None)
    permissions: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default_factory=list)

    # Engagement counters, maintained by the server only.
    likes: Mapped[int] = mapped_column(Integer, default=0)
    views: Mapped[int] = mapped_column(Integer, default=0)
    share: Mapped[int] = mapped_column(Integer, default=0)
    remixes: Mapped[int] = mapped_column(Integer, default=0)
    downloads: Mapped[int] = mapped_column(Integer, default=0)


class CommunityDesignLike(AuditedBase):
    __tablename__ = "community_designs_likes"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    community_designs_likes_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    community_designs_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
