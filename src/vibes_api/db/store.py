"""Single-entity-type persistence adapter used by the generic CRUD routes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement

from vibes_api.core.errors import ValidationError
from vibes_api.db.base import utcnow

logger = logging.getLogger(__name__)

Predicates = Sequence[ColumnElement[bool]]


class ResourceStore:
    """Record-of-truth operations for one model.

    Writes are flushed, not committed; call :meth:`commit` once the request's
    unit of work is complete so multi-step writes land atomically.

    Args:
        db: Request-scoped session.
        model: SQLAlchemy model class.
        id_field: Name of the model's integer primary key attribute.
    """

    def __init__(self, db: Session, model: type, id_field: str) -> None:
        self.db = db
        self.model = model
        self.id_field = id_field

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    def by_id(self, entity_id: int) -> list[ColumnElement[bool]]:
        return [self.id_column == entity_id]

    def create(self, fields: Mapping[str, Any]) -> Any:
        record = self.model(**fields)
        self.db.add(record)
        self._flush()
        return record

    def find_many(
        self,
        predicates: Predicates,
        order_by: Sequence[Any] = (),
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Any]:
        query = select(self.model).where(*predicates)
        if order_by:
            query = query.order_by(*order_by)
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return list(self.db.execute(query).scalars().all())

    def count(self, predicates: Predicates) -> int:
        query = select(func.count()).select_from(self.model).where(*predicates)
        return self.db.execute(query).scalar() or 0

    def find_one(self, predicates: Predicates) -> Any | None:
        query = select(self.model).where(*predicates).limit(1)
        return self.db.execute(query).scalars().first()

    def update_one(self, predicates: Predicates, patch: Mapping[str, Any]) -> Any | None:
        """Merge ``patch`` into the matching record and return it, or None."""
        record = self.find_one(predicates)
        if record is None:
            return None
        for field, value in patch.items():
            setattr(record, field, value)
        record.updated_at = utcnow()
        self._flush()
        return record

    def delete_one(self, predicates: Predicates) -> Any | None:
        record = self.find_one(predicates)
        if record is None:
            return None
        self.db.delete(record)
        self._flush()
        return record

    def increment(self, predicates: Predicates, field: str, amount: int = 1) -> int:
        """Add ``amount`` to a counter column in a single UPDATE statement.

        Returns:
            Number of rows changed.
        """
        column = getattr(self.model, field)
        result = self.db.execute(
            update(self.model)
            .where(*predicates)
            .values({field: column + amount})
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self._conflict()

    def _flush(self) -> None:
        try:
            self.db.flush()
        except IntegrityError:
            self._conflict()

    def _conflict(self) -> None:
        self.db.rollback()
        logger.info("Integrity violation on %s", self.model.__tablename__)
        raise ValidationError("Record conflicts with an existing entry") from None
