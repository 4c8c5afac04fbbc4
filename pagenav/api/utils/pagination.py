"""Pagination utilities for API endpoints."""

from dataclasses import dataclass
from typing import Any

from pagenav.models.pager import PaginationState


@dataclass
class PaginationParams:
    """Pagination parameters from query string (page is one-based)."""

    page: int = 1
    page_size: int = 20
    max_page_size: int = 1000

    @property
    def effective_page_size(self) -> int:
        return min(self.page_size, self.max_page_size)

    @property
    def page_index(self) -> int:
        return self.page - 1

    def total_pages(self, total_records: int) -> int:
        """Pages needed for ``total_records``; zero when there are none."""
        if total_records <= 0:
            return 0
        return -(-total_records // self.effective_page_size)

    def to_state(self, total_records: int, **options: Any) -> PaginationState:
        """Build the PaginationState for this request."""
        return PaginationState(
            page_index=self.page_index,
            total_records=total_records,
            total_pages=self.total_pages(total_records),
            **options,
        )
