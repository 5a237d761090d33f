"""
Pagination Utilities

Offset/limit pagination used by every list endpoint. The total is always
computed with the same filters as the page query, so the ``pages`` value a
client sees is consistent with the rows it can fetch.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def page_count(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` rows, ``ceil(total / limit)``."""
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return math.ceil(total / limit)


def page_offset(page: int, limit: int) -> int:
    if page < 1:
        raise ValueError("page must be >= 1")
    return (page - 1) * limit


@dataclass
class Page(Generic[T]):
    """One page of results plus the unpaginated total."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def pages(self) -> int:
        return page_count(self.total, self.limit)

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": self.items,
            "pagination": {
                "page": self.page,
                "limit": self.limit,
                "total": self.total,
                "pages": self.pages,
            },
        }


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class PaginationParams:
    """
    FastAPI dependency for pagination parameters.

    Usage:
        @router.get("/items")
        async def list_items(pagination: PaginationParams = Depends()):
            ...
    """

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number, starting at 1"),
        limit: int = Query(
            default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Number of items per page"
        ),
    ):
        self.page = page
        self.limit = limit
