"""Response builders package."""

from .pager import PageWindowBuilder, PagerResponseBuilder

__all__ = [
    "PagerResponseBuilder",
    "PageWindowBuilder",
]
