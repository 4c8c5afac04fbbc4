"""Pager models: pagination state, navigation items and rendered links."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pagenav.exceptions import ConfigurationError


class LinkStyle(str, Enum):
    """Strategy a link renderer uses to build hrefs."""

    ROUTE = "route"
    ACTION = "action"


class RenderFailurePolicy(str, Enum):
    """What to do when a renderer fails for a single item."""

    ABORT = "abort"
    PLACEHOLDER = "placeholder"


class ItemKind(str, Enum):
    """Navigation item kinds, in display order."""

    TOTAL_SUMMARY = "total_summary"
    FIRST = "first"
    PREVIOUS = "previous"
    INDIVIDUAL_PAGE = "individual_page"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class PaginationState:
    """Immutable snapshot of paging facts and display toggles.

    ``page_index`` is zero-based. ``total_pages`` is zero exactly when
    ``total_records`` is zero; otherwise ``page_index`` must address an
    existing page.
    """

    page_index: int
    total_records: int
    total_pages: int
    individual_pages_displayed_count: int = 5
    show_total_summary: bool = True
    show_pager_items: bool = True
    show_first: bool = True
    show_previous: bool = True
    show_individual_pages: bool = True
    show_next: bool = True
    show_last: bool = True
    link_style: LinkStyle = LinkStyle.ROUTE

    def __post_init__(self):
        if self.individual_pages_displayed_count <= 0:
            raise ConfigurationError(
                "individual_pages_displayed_count must be >= 1",
                individual_pages_displayed_count=self.individual_pages_displayed_count,
            )
        if self.page_index < 0 or self.total_records < 0 or self.total_pages < 0:
            raise ConfigurationError(
                "page_index, total_records and total_pages must be >= 0",
                page_index=self.page_index,
                total_records=self.total_records,
                total_pages=self.total_pages,
            )
        if (self.total_pages == 0) != (self.total_records == 0):
            raise ConfigurationError(
                "total_pages must be 0 exactly when total_records is 0",
                total_records=self.total_records,
                total_pages=self.total_pages,
            )
        if self.total_pages > 0 and self.page_index >= self.total_pages:
            raise ConfigurationError(
                f"page_index {self.page_index} is outside [0, {self.total_pages})",
                page_index=self.page_index,
                total_pages=self.total_pages,
            )

    @classmethod
    def from_records(
        cls, page_index: int, total_records: int, page_size: int, **options: Any
    ) -> "PaginationState":
        """Build a state, deriving total_pages from a page size."""
        if page_size <= 0:
            raise ConfigurationError("page_size must be >= 1", page_size=page_size)
        total_pages = -(-total_records // page_size) if total_records > 0 else 0
        return cls(
            page_index=page_index,
            total_records=total_records,
            total_pages=total_pages,
            **options,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageIndex": self.page_index,
            "totalRecords": self.total_records,
            "totalPages": self.total_pages,
            "individualPagesDisplayedCount": self.individual_pages_displayed_count,
            "linkStyle": self.link_style.value,
        }


@dataclass(frozen=True)
class PaginationItem:
    """One navigation item, tagged by ``kind``.

    ``target_page`` is zero-based and is ``None`` only for the total summary,
    which carries the paging totals instead.
    """

    kind: ItemKind
    target_page: Optional[int] = None
    is_current: bool = False
    page_index: Optional[int] = None
    total_pages: Optional[int] = None
    total_records: Optional[int] = None

    @classmethod
    def total_summary(
        cls, page_index: int, total_pages: int, total_records: int
    ) -> "PaginationItem":
        return cls(
            ItemKind.TOTAL_SUMMARY,
            page_index=page_index,
            total_pages=total_pages,
            total_records=total_records,
        )

    @classmethod
    def first(cls) -> "PaginationItem":
        return cls(ItemKind.FIRST, target_page=0)

    @classmethod
    def previous(cls, page_index: int) -> "PaginationItem":
        return cls(ItemKind.PREVIOUS, target_page=page_index - 1)

    @classmethod
    def individual_page(cls, page: int, is_current: bool = False) -> "PaginationItem":
        return cls(ItemKind.INDIVIDUAL_PAGE, target_page=page, is_current=is_current)

    @classmethod
    def next(cls, page_index: int) -> "PaginationItem":
        return cls(ItemKind.NEXT, target_page=page_index + 1)

    @classmethod
    def last(cls, total_pages: int) -> "PaginationItem":
        return cls(ItemKind.LAST, target_page=total_pages - 1)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.kind is ItemKind.TOTAL_SUMMARY:
            data["pageIndex"] = self.page_index
            data["totalPages"] = self.total_pages
            data["totalRecords"] = self.total_records
            return data
        data["targetPage"] = self.target_page
        if self.kind is ItemKind.INDIVIDUAL_PAGE:
            data["isCurrent"] = self.is_current
        return data


@dataclass(frozen=True)
class RenderedLink:
    """Renderer output for one item. ``href`` is None for plain labels."""

    kind: ItemKind
    text: str
    href: Optional[str] = None
    title: Optional[str] = None
    target_page: Optional[int] = None
    is_current: bool = False
    error: Optional[str] = field(default=None, compare=False)

    @property
    def is_link(self) -> bool:
        return self.href is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "kind": self.kind.value,
            "text": self.text,
            "href": self.href,
        }
        if self.title:
            data["title"] = self.title
        if self.target_page is not None:
            data["targetPage"] = self.target_page
        if self.is_current:
            data["isCurrent"] = True
        if self.error:
            data["error"] = self.error
        return data
