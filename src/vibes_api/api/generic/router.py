"""Generic router factories for declarative CRUD endpoints."""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from vibes_api.core.errors import NotFoundError, ValidationError
from vibes_api.core.security import optional_requester, require_requester
from vibes_api.db.session import get_db
from vibes_api.db.store import ResourceStore
from vibes_api.schemas.generic import Envelope, ErrorEnvelope, PaginatedEnvelope

from .filters import build_filter, make_filter_dependency
from .pagination import DEFAULT_LIMIT, MAX_LIMIT, PageRequest, paginate
from .resource import ResourceDescriptor

logger = logging.getLogger(__name__)

_NOT_FOUND_RESPONSES = {404: {"model": ErrorEnvelope}}


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def store_for(resource: ResourceDescriptor, db: Session) -> ResourceStore:
    return ResourceStore(db, resource.model, resource.id_field)


def serialize(resource: ResourceDescriptor, record: Any) -> Any:
    return resource.response_schema.model_validate(record)


def resolve_order_by(
    resource: ResourceDescriptor, sort_by: str | None, sort_order: str
) -> list[Any]:
    """ORDER BY clauses for ``sortBy``/``sortOrder``.

    Defaults to newest-created first; the id column breaks ties so page
    boundaries are deterministic.
    """
    model = resource.model
    id_column = getattr(model, resource.id_field)
    if sort_by is None:
        return [model.created_at.desc(), id_column.desc()]
    field = resource.sort_fields.get(sort_by)
    if field is None:
        raise ValidationError(f"Cannot sort by '{sort_by}'")
    column = getattr(model, field)
    if sort_order == "asc":
        return [column.asc(), id_column.asc()]
    return [column.desc(), id_column.desc()]


def create_read_router(resource: ResourceDescriptor) -> APIRouter:
    """Create an APIRouter with list, owner-scoped list and get-by-id endpoints.

    Args:
        resource: Descriptor of the entity type.

    Returns:
        Configured APIRouter. Routes whose path is ``None`` are skipped.
    """
    router = APIRouter(prefix=resource.prefix, tags=list(resource.tags))
    filter_dep = make_filter_dependency(resource.filter_spec, resource_name=resource.name)
    read_auth = optional_requester if resource.public_reads else require_requester
    list_response_model = PaginatedEnvelope[resource.response_schema]
    name_snake = _snake(resource.name)

    def _list(
        db: Session,
        filters: Any,
        page: int,
        limit: int,
        sort_by: str | None,
        sort_order: str,
        owner_id: int | None = None,
    ) -> tuple[list[Any], dict[str, Any]]:
        filter_values = dataclasses.asdict(filters)
        predicates = build_filter(
            resource.model, resource.filter_spec, filter_values, owner_id=owner_id
        )
        order_by = resolve_order_by(resource, sort_by, sort_order)
        page_request = PageRequest(page=page, limit=limit)

        store = store_for(resource, db)
        total = store.count(predicates)
        records = []
        if page_request.skip < total:
            records = store.find_many(
                predicates, order_by=order_by, skip=page_request.skip, limit=page_request.limit
            )

        info = paginate(page_request, total)
        return (
            [serialize(resource, record) for record in records],
            info.as_dict(resource.pagination_style),
        )

    def list_items(
        page: int = Query(default=1, ge=1),
        limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
        sort_by: str | None = Query(default=None, alias="sortBy"),
        sort_order: str = Query(default="desc", alias="sortOrder", pattern="^(asc|desc)$"),
        filters: Any = Depends(filter_dep),
        requester_id: int | None = Depends(read_auth),
        db: Session = Depends(get_db),
    ) -> dict:
        data, pagination = _list(db, filters, page, limit, sort_by, sort_order)
        return {
            "status": HTTP_200_OK,
            "message": f"{resource.plural_label} retrieved successfully",
            "data": data,
            "pagination": pagination,
        }

    def list_owned_items(
        page: int = Query(default=1, ge=1),
        limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
        sort_by: str | None = Query(default=None, alias="sortBy"),
        sort_order: str = Query(default="desc", alias="sortOrder", pattern="^(asc|desc)$"),
        filters: Any = Depends(filter_dep),
        requester_id: int = Depends(require_requester),
        db: Session = Depends(get_db),
    ) -> dict:
        data, pagination = _list(
            db, filters, page, limit, sort_by, sort_order, owner_id=requester_id
        )
        return {
            "status": HTTP_200_OK,
            "message": f"User {resource.plural_label.lower()} retrieved successfully",
            "data": data,
            "pagination": pagination,
        }

    def get_item(
        item_id: int = Path(ge=1),
        requester_id: int | None = Depends(read_auth),
        db: Session = Depends(get_db),
    ) -> dict:
        store = store_for(resource, db)
        record = store.find_one(store.by_id(item_id))
        if record is None:
            raise NotFoundError(resource.not_found_message)
        return {
            "status": HTTP_200_OK,
            "message": f"{resource.label} retrieved successfully",
            "data": serialize(resource, record),
        }

    # Rename functions for unique OpenAPI operation_ids across multiple routers
    list_items.__name__ = f"list_{name_snake}s"
    list_owned_items.__name__ = f"list_own_{name_snake}s"
    get_item.__name__ = f"get_{name_snake}"

    if resource.paths.list is not None:
        router.add_api_route(
            resource.paths.list,
            list_items,
            methods=["GET"],
            response_model=list_response_model,
            name=f"list_{name_snake}s",
        )
    if resource.paths.owned is not None:
        router.add_api_route(
            resource.paths.owned,
            list_owned_items,
            methods=["GET"],
            response_model=list_response_model,
            name=f"list_own_{name_snake}s",
        )
    if resource.paths.get is not None:
        router.add_api_route(
            resource.paths.get,
            get_item,
            methods=["GET"],
            response_model=Envelope[resource.response_schema],
            responses=_NOT_FOUND_RESPONSES,
            name=f"get_{name_snake}",
        )

    return router


def create_create_router(resource: ResourceDescriptor) -> APIRouter:
    """Create an APIRouter with a POST endpoint for creating records.

    The creator is the authenticated requester; resources that allow
    anonymous creation fall back to ``resource.default_creator``.
    """
    router = APIRouter(prefix=resource.prefix, tags=list(resource.tags))
    name_snake = _snake(resource.name)
    create_auth = optional_requester if resource.anonymous_create else require_requester

    # Build endpoint function with proper annotations for FastAPI.
    # We can't use `payload: create_schema` directly because
    # `from __future__ import annotations` turns it into a string literal.
    # Instead, we set __annotations__ manually on the function.
    def create_item(
        payload,
        *,
        requester_id: int | None = Depends(create_auth),
        db: Session = Depends(get_db),
    ) -> Any:
        fields = payload.model_dump()
        fields["created_by"] = (
            requester_id if requester_id is not None else resource.default_creator
        )
        store = store_for(resource, db)
        record = store.create(fields)
        store.commit()
        logger.info(
            "%s created: %s=%s by %s",
            resource.label,
            resource.id_field,
            getattr(record, resource.id_field),
            fields["created_by"],
        )
        return {
            "status": HTTP_201_CREATED,
            "message": f"{resource.label} created successfully",
            "data": serialize(resource, record),
        }

    create_item.__annotations__["payload"] = resource.create_schema
    create_item.__name__ = f"create_{name_snake}"

    if resource.paths.create is not None:
        router.add_api_route(
            resource.paths.create,
            create_item,
            methods=["POST"],
            response_model=Envelope[resource.response_schema],
            status_code=HTTP_201_CREATED,
            name=f"create_{name_snake}",
        )

    return router


def create_update_router(resource: ResourceDescriptor) -> APIRouter:
    """Create an APIRouter with a PUT endpoint for partial updates.

    The target id comes from ``resource.update_id_field`` in the body, or
    from the ``{item_id}`` path segment when ``update_id_in_path`` is set.
    Only fields present in the body are written.
    """
    router = APIRouter(prefix=resource.prefix, tags=list(resource.tags))
    name_snake = _snake(resource.name)

    def _apply(db: Session, entity_id: int, patch: dict[str, Any], requester_id: int) -> dict:
        patch["updated_by"] = requester_id
        store = store_for(resource, db)
        record = store.update_one(store.by_id(entity_id), patch)
        if record is None:
            raise NotFoundError(resource.not_found_message)
        store.commit()
        logger.info(
            "%s updated: %s=%s by %s", resource.label, resource.id_field, entity_id, requester_id
        )
        return {
            "status": HTTP_200_OK,
            "message": f"{resource.label} updated successfully",
            "data": serialize(resource, record),
        }

    if resource.update_id_in_path:

        def update_item(
            item_id,
            payload,
            *,
            requester_id: int = Depends(require_requester),
            db: Session = Depends(get_db),
        ) -> Any:
            return _apply(db, item_id, payload.model_dump(exclude_unset=True), requester_id)

        update_item.__annotations__["item_id"] = Annotated[int, Path(ge=1)]
    else:

        def update_item(
            payload,
            *,
            requester_id: int = Depends(require_requester),
            db: Session = Depends(get_db),
        ) -> Any:
            patch = payload.model_dump(exclude_unset=True)
            entity_id = patch.pop(resource.update_id_field)
            return _apply(db, entity_id, patch, requester_id)

    update_item.__annotations__["payload"] = resource.update_schema
    update_item.__name__ = f"update_{name_snake}"

    if resource.paths.update is not None:
        router.add_api_route(
            resource.paths.update,
            update_item,
            methods=["PUT"],
            response_model=Envelope[resource.response_schema],
            responses=_NOT_FOUND_RESPONSES,
            name=f"update_{name_snake}",
        )

    return router


def create_delete_router(resource: ResourceDescriptor) -> APIRouter:
    """Create an APIRouter with a DELETE endpoint.

    Soft-deleting resources flip ``status`` to false and return the record;
    the others remove the row and return ``data: null``.
    """
    router = APIRouter(prefix=resource.prefix, tags=list(resource.tags))
    name_snake = _snake(resource.name)
    response_model = (
        Envelope[resource.response_schema] if resource.soft_delete else Envelope[None]
    )

    def delete_item(
        item_id: int = Path(ge=1),
        requester_id: int = Depends(require_requester),
        db: Session = Depends(get_db),
    ) -> Any:
        store = store_for(resource, db)
        predicates = store.by_id(item_id)
        if resource.soft_delete:
            record = store.update_one(predicates, {"status": False, "updated_by": requester_id})
        else:
            record = store.delete_one(predicates)
        if record is None:
            raise NotFoundError(resource.not_found_message)
        data = serialize(resource, record) if resource.soft_delete else None
        store.commit()
        logger.info(
            "%s deleted (%s): %s=%s by %s",
            resource.label,
            "soft" if resource.soft_delete else "hard",
            resource.id_field,
            item_id,
            requester_id,
        )
        return {
            "status": HTTP_200_OK,
            "message": f"{resource.label} deleted successfully",
            "data": data,
        }

    delete_item.__name__ = f"delete_{name_snake}"

    if resource.paths.delete is not None:
        router.add_api_route(
            resource.paths.delete,
            delete_item,
            methods=["DELETE"],
            response_model=response_model,
            responses=_NOT_FOUND_RESPONSES,
            name=f"delete_{name_snake}",
        )

    return router


def create_crud_router(resource: ResourceDescriptor) -> APIRouter:
    """Full CRUD surface of one resource."""
    router = APIRouter()
    router.include_router(create_create_router(resource))
    router.include_router(create_read_router(resource))
    router.include_router(create_update_router(resource))
    router.include_router(create_delete_router(resource))
    return router
