"""Inclusion predicates for each navigation item kind.

Every predicate is a pure function of the pagination state. None of them
looks at whether another item kind was included; the pager block gate is
shared by the items it governs.
"""

from pagenav.models.pager import PaginationState

# First/Last are suppressed when they would land next to or inside the window.
EDGE_LINK_THRESHOLD = 3


def shows_total_summary(state: PaginationState) -> bool:
    return state.show_total_summary and state.total_pages > 0


def pager_block_active(state: PaginationState) -> bool:
    """Gate for First, Previous, individual pages, Next and Last."""
    return state.show_pager_items and state.total_pages > 1


def shows_first(state: PaginationState) -> bool:
    return (
        pager_block_active(state)
        and state.show_first
        and state.page_index >= EDGE_LINK_THRESHOLD
        and state.total_pages > state.individual_pages_displayed_count
    )


def shows_previous(state: PaginationState) -> bool:
    return pager_block_active(state) and state.show_previous and state.page_index > 0


def shows_individual_pages(state: PaginationState) -> bool:
    return pager_block_active(state) and state.show_individual_pages


def shows_next(state: PaginationState) -> bool:
    return (
        pager_block_active(state)
        and state.show_next
        and state.page_index + 1 < state.total_pages
    )


def shows_last(state: PaginationState) -> bool:
    return (
        pager_block_active(state)
        and state.show_last
        and state.page_index + EDGE_LINK_THRESHOLD < state.total_pages
        and state.total_pages > state.individual_pages_displayed_count
    )
