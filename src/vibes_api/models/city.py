from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vibes_api.db.base import AUTOINCREMENT_TABLE_ARGS, AuditedBase


class City(AuditedBase):
    __tablename__ = "cities"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    city_id: Mapped[int] = mapped_column(primary_key=True, init=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    state_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    country_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
