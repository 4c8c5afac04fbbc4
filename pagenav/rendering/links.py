"""Reference link renderer producing route- or action-style hrefs."""

from typing import Awaitable, Callable, Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pagenav.exceptions import RenderError
from pagenav.models.pager import ItemKind, LinkStyle, PaginationItem, RenderedLink
from pagenav.rendering.base import LinkRenderer
from pagenav.rendering.text import TextCatalog


def route_href(base_path: str, page_number: int) -> str:
    """``/items`` + 3 -> ``/items/page/3``."""
    return f"{base_path.rstrip('/')}/page/{page_number}"


def action_href(base_path: str, page_number: int, param: str = "page") -> str:
    """``/items?sort=name`` + 3 -> ``/items?sort=name&page=3``."""
    parts = urlsplit(base_path)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != param]
    query.append((param, str(page_number)))
    return urlunsplit(parts._replace(query=urlencode(query)))


class UrlLinkRenderer(LinkRenderer):
    """Renders items as links under ``base_path`` with catalog text.

    Hrefs carry one-based page numbers; item target pages stay zero-based.
    """

    _TEXT_KEYS = {
        ItemKind.FIRST: "pager.first",
        ItemKind.PREVIOUS: "pager.previous",
        ItemKind.NEXT: "pager.next",
        ItemKind.LAST: "pager.last",
    }

    def __init__(
        self,
        base_path: str,
        catalog: Optional[TextCatalog] = None,
        page_query_param: str = "page",
    ):
        self.base_path = base_path
        self.catalog = catalog or TextCatalog()
        self.page_query_param = page_query_param
        self._handlers: Dict[
            ItemKind, Callable[[PaginationItem, LinkStyle], Awaitable[RenderedLink]]
        ] = {
            ItemKind.TOTAL_SUMMARY: self._render_summary,
            ItemKind.INDIVIDUAL_PAGE: self._render_page,
            ItemKind.FIRST: self._render_navigation,
            ItemKind.PREVIOUS: self._render_navigation,
            ItemKind.NEXT: self._render_navigation,
            ItemKind.LAST: self._render_navigation,
        }

    def href(self, target_page: int, style: LinkStyle) -> str:
        page_number = target_page + 1
        if style is LinkStyle.ACTION:
            return action_href(self.base_path, page_number, self.page_query_param)
        return route_href(self.base_path, page_number)

    async def render(self, item: PaginationItem, style: LinkStyle) -> RenderedLink:
        try:
            return await self._handlers[item.kind](item, style)
        except RenderError as e:
            if e.item is not None:
                raise
            raise RenderError(e.message, item=item, **e.details) from e

    async def _render_summary(self, item: PaginationItem, style: LinkStyle) -> RenderedLink:
        text = await self.catalog.lookup(
            "pager.total_summary",
            page=item.page_index + 1,
            total_pages=item.total_pages,
            total_records=item.total_records,
        )
        return RenderedLink(kind=item.kind, text=text)

    async def _render_page(self, item: PaginationItem, style: LinkStyle) -> RenderedLink:
        page_number = item.target_page + 1
        title = await self.catalog.lookup("pager.page.title", page=page_number)
        return RenderedLink(
            kind=item.kind,
            text=str(page_number),
            href=self.href(item.target_page, style),
            title=title,
            target_page=item.target_page,
        )

    async def _render_navigation(
        self, item: PaginationItem, style: LinkStyle
    ) -> RenderedLink:
        key = self._TEXT_KEYS[item.kind]
        text = await self.catalog.lookup(key)
        title = None
        if self.catalog.has(f"{key}.title"):
            title = await self.catalog.lookup(f"{key}.title")
        return RenderedLink(
            kind=item.kind,
            text=text,
            href=self.href(item.target_page, style),
            title=title,
            target_page=item.target_page,
        )
