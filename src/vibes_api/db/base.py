from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(MappedAsDataclass, DeclarativeBase):
    pass


class AuditedBase(Base):
    """Status flag plus creator/updater stamps shared by every resource.

    Subclasses declare their own integer primary key (``<resource>_id``) and
    set ``sqlite_autoincrement`` so identifiers are never reused.
    """

    __abstract__ = True

    status: Mapped[bool] = mapped_column(Boolean, default=True, kw_only=True)
    created_by: Mapped[int | None] = mapped_column(Integer, default=None, kw_only=True)
    updated_by: Mapped[int | None] = mapped_column(Integer, default=None, kw_only=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        init=False,
        default_factory=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        init=False,
        default_factory=utcnow,
    )


AUTOINCREMENT_TABLE_ARGS = {"sqlite_autoincrement": True}
