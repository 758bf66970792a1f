"""Community designs and the likes recorded against them."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette.status import HTTP_201_CREATED

from vibes_api.api.generic import (
    FilterField,
    ResourceDescriptor,
    RoutePaths,
    StatusFilter,
    create_crud_router,
)
from vibes_api.api.generic.router import serialize, store_for
from vibes_api.core.errors import NotFoundError
from vibes_api.core.security import optional_requester
from vibes_api.db.session import get_db
from vibes_api.models import CommunityDesign, CommunityDesignLike
from vibes_api.schemas.community import (
    CommunityDesignCreate,
    CommunityDesignLikeCreate,
    CommunityDesignLikeResponse,
    CommunityDesignLikeUpdate,
    CommunityDesignResponse,
    CommunityDesignUpdate,
)
from vibes_api.schemas.generic import Envelope, ErrorEnvelope

logger = logging.getLogger(__name__)

COMMUNITY_DESIGNS = ResourceDescriptor(
    name="CommunityDesign",
    label="Community design",
    plural_label="Community designs",
    prefix="/master/community-designs",
    model=CommunityDesign,
    id_field="community_designs_id",
    response_schema=CommunityDesignResponse,
    create_schema=CommunityDesignCreate,
    update_schema=CommunityDesignUpdate,
    search_columns=("title", "sub_title"),
    filter_fields=(FilterField("categories_id"),),
    status_filter=StatusFilter.IGNORED,
    anonymous_create=True,
    default_creator=1,
    tags=("community-designs",),
)

# Likes are created by a dedicated handler so the design's counter moves
# in the same transaction as the insert.
COMMUNITY_DESIGN_LIKES = ResourceDescriptor(
    name="CommunityDesignLike",
    label="Community design like",
    plural_label="Community design likes",
    prefix="/master/community-designs-likes",
    model=CommunityDesignLike,
    id_field="community_designs_likes_id",
    response_schema=CommunityDesignLikeResponse,
    create_schema=CommunityDesignLikeCreate,
    update_schema=CommunityDesignLikeUpdate,
    filter_fields=(FilterField("community_designs_id"),),
    status_filter=StatusFilter.IGNORED,
    anonymous_create=True,
    default_creator=1,
    public_reads=True,
    paths=RoutePaths(
        create=None,
        get="/getCommunityDesignLikeById/{item_id}",
        update="/updateCommunityDesignLikeById",
        delete="/deleteCommunityDesignLikeById/{item_id}",
    ),
    tags=("community-designs",),
)

router = APIRouter()
router.include_router(create_crud_router(COMMUNITY_DESIGNS))


@router.post(
    f"{COMMUNITY_DESIGN_LIKES.prefix}/create",
    response_model=Envelope[CommunityDesignLikeResponse],
    status_code=HTTP_201_CREATED,
    responses={404: {"model": ErrorEnvelope}},
    tags=list(COMMUNITY_DESIGN_LIKES.tags),
)
def create_community_design_like(
    payload: CommunityDesignLikeCreate,
    requester_id: int | None = Depends(optional_requester),
    db: Session = Depends(get_db),
) -> dict:
    """Record a like and bump the design's ``likes`` counter atomically.

    Nothing is written when the design does not exist.
    """
    designs = store_for(COMMUNITY_DESIGNS, db)
    design_filter = designs.by_id(payload.community_designs_id)
    if designs.find_one(design_filter) is None:
        raise NotFoundError("Community Design not found")

    likes = store_for(COMMUNITY_DESIGN_LIKES, db)
    fields = payload.model_dump()
    fields["created_by"] = (
        requester_id if requester_id is not None else COMMUNITY_DESIGN_LIKES.default_creator
    )
    record = likes.create(fields)
    designs.increment(design_filter, "likes")
    likes.commit()

    logger.info(
        "Community design like created: community_designs_likes_id=%s on design %s by %s",
        record.community_designs_likes_id,
        payload.community_designs_id,
        fields["created_by"],
    )
    return {
        "status": HTTP_201_CREATED,
        "message": "Community design like created successfully",
        "data": serialize(COMMUNITY_DESIGN_LIKES, record),
    }


router.include_router(create_crud_router(COMMUNITY_DESIGN_LIKES))
