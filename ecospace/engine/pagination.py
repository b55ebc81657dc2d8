"""Pagination calculator — page metadata from a total count and a descriptor."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ecospace.engine.query import QueryDescriptor


@dataclass(frozen=True, slots=True)
class PaginationMeta:
    """Page metadata.

    ``has_exceeded_page`` is None when there are no items at all (a page past
    an empty result is not meaningfully "exceeded"); ``max_limit_applied`` is
    None unless the page size hit the configured maximum.
    """

    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool
    has_exceeded_page: bool | None = None
    max_limit_applied: bool | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "current_page": self.current_page,
            "page_size": self.page_size,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
            "has_previous_page": self.has_previous_page,
            "has_next_page": self.has_next_page,
        }
        if self.has_exceeded_page is not None:
            payload["has_exceeded_page"] = self.has_exceeded_page
        if self.max_limit_applied is not None:
            payload["max_limit_applied"] = self.max_limit_applied
        return payload


def calculate_pagination(total_items: int, descriptor: QueryDescriptor) -> PaginationMeta:
    if total_items < 0:
        raise ValueError("total_items must be >= 0")

    page_size = descriptor.limit
    current_page = descriptor.page
    total_pages = math.ceil(total_items / page_size)

    return PaginationMeta(
        current_page=current_page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_previous_page=current_page > 1,
        has_next_page=current_page < total_pages,
        has_exceeded_page=(current_page > total_pages) if total_items > 0 else None,
        max_limit_applied=True if page_size == descriptor.max_limit else None,
    )
