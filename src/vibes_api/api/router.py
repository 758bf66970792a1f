from __future__ import annotations

from fastapi import APIRouter

from vibes_api.api.routes import (
    admin,
    cities,
    client_reviews,
    community_designs,
    escrow,
    global_search,
    health,
    master,
)

router = APIRouter()
router.include_router(health.router)
router.include_router(master.router)
router.include_router(admin.router)
router.include_router(cities.router)
router.include_router(global_search.router)
router.include_router(community_designs.router)
router.include_router(client_reviews.router)
router.include_router(escrow.router)
