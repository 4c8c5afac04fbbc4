"""Link renderer capability consumed by pager assembly."""

from abc import ABC, abstractmethod

from pagenav.models.pager import LinkStyle, PaginationItem, RenderedLink


class LinkRenderer(ABC):
    """Turns a navigation item into a renderable link or label.

    Implementations may await text lookups. A failure for one item is
    reported by raising ``RenderError``.
    """

    @abstractmethod
    async def render(self, item: PaginationItem, style: LinkStyle) -> RenderedLink:
        """Render ``item`` using the ``style`` href strategy."""
