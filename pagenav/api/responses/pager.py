"""Response builders for pager endpoints."""

from typing import Any, Dict, List

from pagenav.models.pager import PaginationItem, PaginationState, RenderedLink
from pagenav.pager.window import PageWindow


class PagerResponseBuilder:
    """Builder for pager responses."""

    def __init__(self, state: PaginationState):
        self.data: Dict[str, Any] = {"state": state.to_dict()}

    def with_page_size(self, page_size: int) -> "PagerResponseBuilder":
        """Add the effective page size."""
        self.data["state"]["pageSize"] = page_size
        return self

    def with_sequence(
        self, items: List[PaginationItem], links: List[RenderedLink]
    ) -> "PagerResponseBuilder":
        """Add items and rendered links; an empty sequence adds no pager."""
        if not items:
            return self

        self.data["pager"] = {
            "items": [item.to_dict() for item in items],
            "links": [link.to_dict() for link in links],
        }
        return self

    def build(self) -> Dict[str, Any]:
        """Build and return the final response."""
        return self.data


class PageWindowBuilder:
    """Builder for window responses."""

    def __init__(self, window: PageWindow):
        self.data: Dict[str, Any] = {
            "firstPage": window.first_page,
            "lastPage": window.last_page,
            "size": window.size,
        }

    def with_pages(self, window: PageWindow) -> "PageWindowBuilder":
        """Add the expanded page list."""
        self.data["pages"] = list(window.pages)
        return self

    def with_current(self, page_index: int) -> "PageWindowBuilder":
        """Add the current page."""
        self.data["pageIndex"] = page_index
        return self

    def build(self) -> Dict[str, Any]:
        """Build and return the final response."""
        return self.data
