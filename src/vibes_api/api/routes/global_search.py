from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from starlette.status import HTTP_200_OK

from vibes_api.api.generic import ResourceDescriptor, create_crud_router
from vibes_api.api.generic.filters import search_predicate
from vibes_api.api.generic.router import resolve_order_by, serialize, store_for
from vibes_api.core.errors import ValidationError
from vibes_api.db.session import get_db
from vibes_api.models import GlobalSearchEntry
from vibes_api.schemas.generic import Envelope
from vibes_api.schemas.global_search import (
    GlobalSearchCreate,
    GlobalSearchResponse,
    GlobalSearchUpdate,
)

logger = logging.getLogger(__name__)

SEARCH_RESULT_LIMIT = 50

GLOBAL_SEARCH = ResourceDescriptor(
    name="GlobalSearch",
    label="Global search entry",
    plural_label="Global search entries",
    prefix="/master/global-search",
    model=GlobalSearchEntry,
    id_field="global_search_id",
    response_schema=GlobalSearchResponse,
    create_schema=GlobalSearchCreate,
    update_schema=GlobalSearchUpdate,
    search_columns=("page_name", "page_routes", "page_content"),
    status_param="Status",
    tags=("global-search",),
)

router = APIRouter()


@router.get(
    f"{GLOBAL_SEARCH.prefix}/search",
    response_model=Envelope[list[GlobalSearchResponse]],
    tags=list(GLOBAL_SEARCH.tags),
)
def search_pages(
    q: str | None = Query(default=None, description="Text to look for in page names, routes and content"),
    db: Session = Depends(get_db),
) -> dict:
    term = (q or "").strip()
    if not term:
        raise ValidationError("Search query is required")

    store = store_for(GLOBAL_SEARCH, db)
    predicates = [
        search_predicate(GlobalSearchEntry, GLOBAL_SEARCH.search_columns, term),
        GlobalSearchEntry.status.is_(True),
    ]
    records = store.find_many(
        predicates,
        order_by=resolve_order_by(GLOBAL_SEARCH, None, "desc"),
        limit=SEARCH_RESULT_LIMIT,
    )
    logger.debug("Global search for %r matched %d entries", term, len(records))
    return {
        "status": HTTP_200_OK,
        "message": "Search results retrieved successfully",
        "data": [serialize(GLOBAL_SEARCH, record) for record in records],
    }


router.include_router(create_crud_router(GLOBAL_SEARCH))
