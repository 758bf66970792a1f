"""Page windows and paging metadata for list endpoints."""

from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class PaginationStyle(Enum):
    """Key set used for the ``pagination`` object of a list response.

    Existing clients read one key set or the other.
    """

    EXTENDED = "extended"  # currentPage/totalPages/totalItems/itemsPerPage/hasNextPage/hasPrevPage
    CLASSIC = "classic"  # current/pages/total/limit


@dataclasses.dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclasses.dataclass(frozen=True)
class PageInfo:
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total > 0 else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1

    def as_dict(self, style: PaginationStyle) -> dict[str, Any]:
        if style == PaginationStyle.CLASSIC:
            return {
                "current": self.page,
                "pages": self.total_pages,
                "total": self.total,
                "limit": self.limit,
            }
        return {
            "currentPage": self.page,
            "totalPages": self.total_pages,
            "totalItems": self.total,
            "itemsPerPage": self.limit,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }


def paginate(request: PageRequest, total: int) -> PageInfo:
    """Paging metadata for ``request`` given ``total`` matching records.

    A page past the last one is valid and simply yields no records.
    """
    return PageInfo(page=request.page, limit=request.limit, total=total)
