"""Keyed link text lookup."""

from typing import Any, Dict, Mapping, Optional

from pagenav.exceptions import RenderError

DEFAULT_TEXTS: Dict[str, str] = {
    "pager.total_summary": "Page {page} of {total_pages} ({total_records} total records)",
    "pager.first": "First",
    "pager.first.title": "Go to first page",
    "pager.previous": "Previous",
    "pager.previous.title": "Go to previous page",
    "pager.page.title": "Go to page {page}",
    "pager.next": "Next",
    "pager.next.title": "Go to next page",
    "pager.last": "Last",
    "pager.last.title": "Go to last page",
}


class TextCatalog:
    """Resolves text keys to formatted strings.

    Lookups are async so catalogs backed by remote translation stores can
    share the same interface.
    """

    def __init__(self, texts: Optional[Mapping[str, str]] = None):
        self.texts = dict(DEFAULT_TEXTS if texts is None else texts)

    async def lookup(self, key: str, **params: Any) -> str:
        try:
            template = self.texts[key]
        except KeyError:
            raise RenderError(f"Missing text for key '{key}'", key=key) from None

        try:
            return template.format(**params)
        except (KeyError, IndexError, ValueError) as e:
            raise RenderError(f"Cannot format text '{key}': {e}", key=key) from e

    def has(self, key: str) -> bool:
        return key in self.texts
