"""Link rendering for navigation items."""

from .assembly import current_page_label, render_items, render_pager
from .base import LinkRenderer
from .links import UrlLinkRenderer, action_href, route_href
from .text import DEFAULT_TEXTS, TextCatalog

__all__ = [
    "LinkRenderer",
    "UrlLinkRenderer",
    "TextCatalog",
    "DEFAULT_TEXTS",
    "action_href",
    "route_href",
    "current_page_label",
    "render_items",
    "render_pager",
]
