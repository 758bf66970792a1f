from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette.status import HTTP_200_OK

from vibes_api.api.generic import ResourceDescriptor, RoutePaths, StatusFilter, create_crud_router
from vibes_api.api.generic.router import resolve_order_by, serialize, store_for
from vibes_api.core.errors import NotFoundError
from vibes_api.db.session import get_db
from vibes_api.models import ClientReview
from vibes_api.schemas.generic import Envelope, ErrorEnvelope
from vibes_api.schemas.review import (
    ClientReviewCreate,
    ClientReviewResponse,
    ClientReviewUpdate,
)

TOP_RATED_THRESHOLD = 4

CLIENT_REVIEWS = ResourceDescriptor(
    name="ClientReview",
    label="Client review",
    plural_label="Client reviews",
    prefix="/client-reviews",
    model=ClientReview,
    id_field="client_review_id",
    response_schema=ClientReviewResponse,
    create_schema=ClientReviewCreate,
    update_schema=ClientReviewUpdate,
    search_columns=("title", "user_name", "description"),
    status_filter=StatusFilter.IGNORED,
    soft_delete=False,
    anonymous_create=True,
    update_id_in_path=True,
    paths=RoutePaths(update="/update/{item_id}"),
    tags=("client-reviews",),
)

router = APIRouter()


@router.get(
    f"{CLIENT_REVIEWS.prefix}/top-rated",
    response_model=Envelope[list[ClientReviewResponse]],
    responses={404: {"model": ErrorEnvelope}},
    tags=list(CLIENT_REVIEWS.tags),
)
def list_top_rated_reviews(db: Session = Depends(get_db)) -> dict:
    """Reviews rated above four stars, newest first."""
    store = store_for(CLIENT_REVIEWS, db)
    records = store.find_many(
        [ClientReview.rating > TOP_RATED_THRESHOLD],
        order_by=resolve_order_by(CLIENT_REVIEWS, None, "desc"),
    )
    if not records:
        raise NotFoundError("No top rated reviews found", data=[])
    return {
        "status": HTTP_200_OK,
        "message": "Top rated reviews retrieved successfully",
        "data": [serialize(CLIENT_REVIEWS, record) for record in records],
    }


router.include_router(create_crud_router(CLIENT_REVIEWS))
