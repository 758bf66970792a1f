"""Resource descriptor: the configuration a generic CRUD router is built from."""

from __future__ import annotations

import dataclasses
from functools import cached_property

from sqlalchemy import inspect as sa_inspect

from .filters import FilterField, FilterSpec, StatusFilter
from .pagination import PaginationStyle


@dataclasses.dataclass(frozen=True)
class RoutePaths:
    """Relative paths of the CRUD routes. ``None`` disables a route."""

    create: str | None = "/create"
    list: str | None = "/getAll"
    get: str | None = "/getById/{item_id}"
    update: str | None = "/update"
    delete: str | None = "/delete/{item_id}"
    owned: str | None = None


@dataclasses.dataclass(frozen=True)
class ResourceDescriptor:
    """Describe one entity type for :func:`create_crud_router`.

    Args:
        name: CamelCase resource name, used for route and operation names.
        label: Singular human label ("Item category") used in messages.
        plural_label: Plural human label ("Item categories").
        prefix: URL prefix (e.g. "/master/item-category").
        model: SQLAlchemy model class.
        id_field: Integer primary key attribute of the model.
        response_schema: Pydantic response schema.
        create_schema: Pydantic schema of the create body.
        update_schema: Pydantic schema of the update body.
        search_columns: Columns matched by the free-text ``search`` parameter.
        filter_fields: Exact-match scoping parameters.
        status_filter: Treatment of the ``status`` query parameter.
        default_status: Status restriction when ``status`` is absent.
        status_param: Query parameter name of the status flag.
        soft_delete: Flip ``status`` instead of removing the record.
        pagination_style: Key set of the ``pagination`` object.
        anonymous_create: Allow creation without a token.
        default_creator: ``created_by`` used when no requester is known.
        public_reads: Serve list and get-by-id without a token.
        update_id_in_path: Take the update target from the path instead of the body.
        update_id_field: Body field holding the update target.
        paths: Route paths.
    """

    name: str
    label: str
    plural_label: str
    prefix: str
    model: type
    id_field: str
    response_schema: type
    create_schema: type
    update_schema: type
    search_columns: tuple[str, ...] = ()
    filter_fields: tuple[FilterField, ...] = ()
    status_filter: StatusFilter = StatusFilter.PARSED
    default_status: bool | None = None
    status_param: str = "status"
    soft_delete: bool = True
    pagination_style: PaginationStyle = PaginationStyle.EXTENDED
    anonymous_create: bool = False
    default_creator: int | None = None
    public_reads: bool = False
    update_id_in_path: bool = False
    update_id_field: str = "id"
    paths: RoutePaths = RoutePaths()
    tags: tuple[str, ...] = ()

    @property
    def filter_spec(self) -> FilterSpec:
        return FilterSpec(
            search_columns=self.search_columns,
            fields=self.filter_fields,
            status_filter=self.status_filter,
            default_status=self.default_status,
            status_param=self.status_param,
        )

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    @cached_property
    def sort_fields(self) -> dict[str, str]:
        """Map accepted ``sortBy`` values to model column attributes.

        Every response field backed by a column is sortable by its Python
        name and by its JSON alias.
        """
        attributes = set(sa_inspect(self.model).column_attrs.keys())
        mapping: dict[str, str] = {}
        for field_name, info in self.response_schema.model_fields.items():
            if field_name not in attributes:
                continue
            mapping[field_name] = field_name
            if info.alias:
                mapping[info.alias] = field_name
        return mapping
