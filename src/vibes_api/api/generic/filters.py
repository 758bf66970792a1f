"""Declarative filter system for generic CRUD endpoints."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from sqlalchemy import or_
from sqlalchemy.sql import ColumnElement

from vibes_api.core.errors import ValidationError

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


class StatusFilter(Enum):
    """How a listing endpoint treats the ``status`` query parameter.

    PARSED: restrict to records whose status equals the parsed boolean.
    PRESENCE: any value restricts to active records; ``status=false`` is
        treated like ``status=true``. Kept for clients of the older endpoints.
    IGNORED: the parameter is accepted but never filters.
    """

    PARSED = "parsed"
    PRESENCE = "presence"
    IGNORED = "ignored"


@dataclasses.dataclass(frozen=True)
class FilterField:
    """Exact-match (foreign-key scoping) filter.

    Args:
        column_name: SQLAlchemy model column name.
        param_name: Query parameter name. Defaults to column_name.
        python_type: Python type for parsing and the OpenAPI schema. Default int.
    """

    column_name: str
    param_name: str | None = None
    python_type: type = int

    @property
    def effective_param_name(self) -> str:
        return self.param_name if self.param_name is not None else self.column_name


@dataclasses.dataclass(frozen=True)
class FilterSpec:
    """Everything a listing endpoint needs to turn query parameters into predicates.

    Args:
        search_columns: Columns matched case-insensitively by ``search`` (OR-combined).
        fields: Exact-match scoping filters.
        status_filter: Treatment of the ``status`` parameter.
        default_status: Status restriction applied when the status parameter is absent.
        status_param: Query parameter carrying the status flag.
    """

    search_columns: tuple[str, ...] = ()
    fields: tuple[FilterField, ...] = ()
    status_filter: StatusFilter = StatusFilter.PARSED
    default_status: bool | None = None
    status_param: str = "status"


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid boolean value for status: {value!r}")


def search_predicate(model: type, columns: Sequence[str], term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match of ``term`` against any of ``columns``."""
    # Escape SQL wildcards so the term matches literally
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return or_(*(getattr(model, name).ilike(pattern, escape="\\") for name in columns))


def build_filter(
    model: type,
    spec: FilterSpec,
    filter_values: Mapping[str, Any],
    *,
    owner_id: int | None = None,
) -> list[ColumnElement[bool]]:
    """Translate recognized query parameters into store predicates.

    Args:
        model: SQLAlchemy model class.
        spec: Declarative filter configuration of the resource.
        filter_values: Dict of param_name -> value from the request. Not modified.
        owner_id: When given, restrict to records created by this requester.

    Returns:
        Predicates to AND together in the store query.
    """
    predicates: list[ColumnElement[bool]] = []

    search = filter_values.get("search")
    if search and spec.search_columns:
        predicates.append(search_predicate(model, spec.search_columns, search))

    status_value = filter_values.get(spec.status_param)
    if spec.status_filter == StatusFilter.PARSED and status_value is not None:
        predicates.append(model.status == parse_bool(status_value))
    elif spec.status_filter == StatusFilter.PRESENCE and status_value is not None:
        predicates.append(model.status.is_(True))
    elif status_value is None and spec.default_status is not None:
        predicates.append(model.status == spec.default_status)

    for field in spec.fields:
        value = filter_values.get(field.effective_param_name)
        if value is not None:
            predicates.append(getattr(model, field.column_name) == value)

    if owner_id is not None:
        predicates.append(model.created_by == owner_id)

    return predicates


def make_filter_dependency(spec: FilterSpec, resource_name: str = "") -> type:
    """Create a dataclass suitable for FastAPI Depends() from filter config.

    FastAPI introspects the class fields as Query parameters.

    Args:
        spec: Filter configuration.
        resource_name: Resource name for unique class naming in OpenAPI schema.

    Returns:
        A dataclass type with Optional fields for each filter parameter.
    """
    fields: list[tuple[str, type, dataclasses.Field]] = [
        ("search", str | None, dataclasses.field(default=None)),
        (spec.status_param, str | None, dataclasses.field(default=None)),
    ]
    for field in spec.fields:
        fields.append(
            (
                field.effective_param_name,
                field.python_type | None,
                dataclasses.field(default=None),
            )
        )

    class_name = f"{resource_name}FilterParams" if resource_name else "FilterParams"
    return dataclasses.make_dataclass(class_name, fields)
