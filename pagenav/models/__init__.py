"""Data models."""

from .pager import (ItemKind, LinkStyle, PaginationItem, PaginationState,
                    RenderedLink, RenderFailurePolicy)

__all__ = [
    "ItemKind",
    "LinkStyle",
    "PaginationItem",
    "PaginationState",
    "RenderedLink",
    "RenderFailurePolicy",
]
