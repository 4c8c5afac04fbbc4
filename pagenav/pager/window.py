"""Sliding window of individually listed page numbers."""

from typing import NamedTuple

from pagenav.exceptions import ConfigurationError


class PageWindow(NamedTuple):
    """Inclusive, zero-based range of pages shown as individual links."""

    first_page: int
    last_page: int

    @property
    def pages(self) -> range:
        return range(self.first_page, self.last_page + 1)

    @property
    def size(self) -> int:
        return self.last_page - self.first_page + 1

    def __contains__(self, page: object) -> bool:
        return isinstance(page, int) and self.first_page <= page <= self.last_page


def compute_window(page_index: int, total_pages: int, width: int) -> PageWindow:
    """
    Center a window of ``width`` pages on ``page_index``.

    Near either end the window is shifted inward so it keeps its full width;
    when there are fewer pages than ``width`` it covers every page.

    Args:
        page_index: Current page (zero-based, within ``[0, total_pages)``)
        total_pages: Number of pages, at least 1
        width: Desired number of individually listed pages

    Returns:
        PageWindow with ``size == min(width, total_pages)``

    Example:
        >>> compute_window(6, 10, 5)
        PageWindow(first_page=4, last_page=8)
        >>> compute_window(0, 10, 5)
        PageWindow(first_page=0, last_page=4)
    """
    if width <= 0:
        raise ConfigurationError("window width must be >= 1", width=width)

    first_page = page_index - width // 2
    first_page = max(0, min(first_page, total_pages - width))
    last_page = min(total_pages - 1, first_page + width - 1)

    return PageWindow(first_page, last_page)
