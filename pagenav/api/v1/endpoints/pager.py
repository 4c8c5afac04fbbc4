"""
Pager routes - navigation sequence generation and rendering.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from pagenav.api.responses.pager import PagerResponseBuilder, PageWindowBuilder
from pagenav.api.utils.pagination import PaginationParams
from pagenav.core.config import Settings, get_settings
from pagenav.core.logging import get_logger_with_context
from pagenav.exceptions import ConfigurationError
from pagenav.models.pager import LinkStyle, RenderFailurePolicy
from pagenav.pager.builder import build_sequence
from pagenav.pager.window import compute_window
from pagenav.rendering.assembly import render_items
from pagenav.rendering.links import UrlLinkRenderer
from pagenav.rendering.text import TextCatalog

router = APIRouter()


def get_text_catalog() -> TextCatalog:
    """Text catalog used for link text and titles."""
    return TextCatalog()


# ============================================================================
# API ENDPOINTS
# ============================================================================


@router.get("/pager", response_model=Dict[str, Any])
async def get_pager(
    request: Request,
    total_records: int = Query(..., ge=0, description="Total records in the result set"),
    page: int = Query(1, ge=1, description="Current page (one-based)"),
    page_size: Optional[int] = Query(None, ge=1, description="Records per page"),
    window: Optional[int] = Query(None, description="Individually listed pages"),
    show_total_summary: Optional[bool] = Query(None),
    show_pager_items: Optional[bool] = Query(None),
    show_first: Optional[bool] = Query(None),
    show_previous: Optional[bool] = Query(None),
    show_individual_pages: Optional[bool] = Query(None),
    show_next: Optional[bool] = Query(None),
    show_last: Optional[bool] = Query(None),
    link_style: Optional[LinkStyle] = Query(None),
    base_path: Optional[str] = Query(None, description="Path the page links point at"),
    failure_policy: Optional[RenderFailurePolicy] = Query(None),
    settings: Settings = Depends(get_settings),
    catalog: TextCatalog = Depends(get_text_catalog),
) -> Dict[str, Any]:
    """
    Build the navigation items for a paged result set and render them as links.

    Returns:
    - state: The pagination state the pager was built from
    - pager: Items and rendered links, omitted when there are no records

    Display toggles and the window width default to the service settings.
    """
    logger = get_logger_with_context(
        __name__, request_id=getattr(request.state, "request_id", None)
    )

    params = PaginationParams(
        page=page,
        page_size=page_size or settings.default_page_size,
        max_page_size=settings.max_page_size,
    )

    overrides = {
        "show_total_summary": show_total_summary,
        "show_pager_items": show_pager_items,
        "show_first": show_first,
        "show_previous": show_previous,
        "show_individual_pages": show_individual_pages,
        "show_next": show_next,
        "show_last": show_last,
        "individual_pages_displayed_count": window,
        "link_style": link_style,
    }
    options = settings.pager_options()
    options.update({key: value for key, value in overrides.items() if value is not None})

    state = params.to_state(total_records, **options)
    items = build_sequence(state)

    renderer = UrlLinkRenderer(
        base_path or settings.base_path,
        catalog=catalog,
        page_query_param=settings.page_query_param,
    )
    links = await render_items(
        items,
        renderer,
        state.link_style,
        failure_policy or settings.render_failure_policy,
    )

    logger.info(
        f"Built pager with {len(items)} items for page {state.page_index} "
        f"of {state.total_pages}"
    )

    return (
        PagerResponseBuilder(state)
        .with_page_size(params.effective_page_size)
        .with_sequence(items, links)
        .build()
    )


@router.get("/pager/window", response_model=Dict[str, Any])
async def get_window(
    total_pages: int = Query(..., ge=1, description="Total number of pages"),
    page: int = Query(1, ge=1, description="Current page (one-based)"),
    window: Optional[int] = Query(None, description="Individually listed pages"),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Get the range of individually listed pages around the current page.

    Pages in the response are zero-based.
    """
    if page > total_pages:
        raise ConfigurationError(
            f"page {page} is beyond the last page {total_pages}",
            page=page,
            total_pages=total_pages,
        )

    width = settings.individual_pages_displayed_count if window is None else window
    page_window = compute_window(page - 1, total_pages, width)

    return (
        PageWindowBuilder(page_window)
        .with_pages(page_window)
        .with_current(page - 1)
        .build()
    )
