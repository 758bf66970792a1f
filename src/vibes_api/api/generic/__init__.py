"""Generic CRUD utilities for declarative CRUD endpoints."""

from __future__ import annotations

from vibes_api.api.generic.filters import FilterField, StatusFilter
from vibes_api.api.generic.pagination import PaginationStyle
from vibes_api.api.generic.resource import ResourceDescriptor, RoutePaths
from vibes_api.api.generic.router import create_crud_router

__all__ = [
    "FilterField",
    "PaginationStyle",
    "ResourceDescriptor",
    "RoutePaths",
    "StatusFilter",
    "create_crud_router",
]
