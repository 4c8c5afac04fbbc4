"""Ordered rendering of a navigation sequence through a LinkRenderer."""

import asyncio
from typing import List, Sequence

from pagenav.core.logging import get_logger, log_event
from pagenav.exceptions import RenderError
from pagenav.models.pager import (LinkStyle, PaginationItem, PaginationState,
                                  RenderedLink, RenderFailurePolicy)
from pagenav.pager.builder import build_sequence
from pagenav.rendering.base import LinkRenderer

logger = get_logger(__name__)


def current_page_label(item: PaginationItem) -> RenderedLink:
    """Current page entries are plain labels and never reach the renderer."""
    return RenderedLink(
        kind=item.kind,
        text=str(item.target_page + 1),
        target_page=item.target_page,
        is_current=True,
    )


def placeholder_link(item: PaginationItem, error: RenderError) -> RenderedLink:
    text = "" if item.target_page is None else str(item.target_page + 1)
    return RenderedLink(
        kind=item.kind,
        text=text,
        target_page=item.target_page,
        is_current=item.is_current,
        error=error.message,
    )


async def _render_one(
    item: PaginationItem, renderer: LinkRenderer, style: LinkStyle
) -> RenderedLink:
    if item.is_current:
        return current_page_label(item)
    try:
        return await renderer.render(item, style)
    except RenderError as e:
        if e.item is None:
            e.item = item
        raise


async def render_items(
    items: Sequence[PaginationItem],
    renderer: LinkRenderer,
    style: LinkStyle,
    policy: RenderFailurePolicy = RenderFailurePolicy.ABORT,
) -> List[RenderedLink]:
    """
    Render items concurrently and return the results in sequence order.

    Args:
        items: Navigation items from the sequence builder
        renderer: Caller-supplied link renderer
        style: Href strategy passed to every renderer call
        policy: ABORT re-raises the first failure in sequence order;
            PLACEHOLDER swaps failed items for placeholder links

    Returns:
        One RenderedLink per item, same order as ``items``

    Raises:
        RenderError: Under ABORT, when any item fails to render
    """
    if not items:
        return []

    results = await asyncio.gather(
        *(_render_one(item, renderer, style) for item in items),
        return_exceptions=True,
    )

    links: List[RenderedLink] = []
    for item, result in zip(items, results):
        if isinstance(result, RenderError):
            log_event(
                logger,
                "error" if policy is RenderFailurePolicy.ABORT else "warning",
                "render_failed",
                kind=item.kind.value,
                target_page=item.target_page,
                error=result.message,
                policy=policy.value,
            )
            if policy is RenderFailurePolicy.ABORT:
                raise result
            links.append(placeholder_link(item, result))
        elif isinstance(result, BaseException):
            raise result
        else:
            links.append(result)

    return links


async def render_pager(
    state: PaginationState,
    renderer: LinkRenderer,
    policy: RenderFailurePolicy = RenderFailurePolicy.ABORT,
) -> List[RenderedLink]:
    """Build the sequence for ``state`` and render it with its link style."""
    items = build_sequence(state)
    return await render_items(items, renderer, state.link_style, policy)
