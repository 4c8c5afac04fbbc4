"""Assembles the ordered navigation item sequence for a pagination state."""

from typing import Callable, Iterable, List, Tuple

from pagenav.models.pager import PaginationItem, PaginationState
from pagenav.pager import policy
from pagenav.pager.window import PageWindow, compute_window

Predicate = Callable[[PaginationState], bool]
Emitter = Callable[[PaginationState, PageWindow], Iterable[PaginationItem]]


def _total_summary(state: PaginationState, window: PageWindow):
    yield PaginationItem.total_summary(
        state.page_index, state.total_pages, state.total_records
    )


def _first(state: PaginationState, window: PageWindow):
    yield PaginationItem.first()


def _previous(state: PaginationState, window: PageWindow):
    yield PaginationItem.previous(state.page_index)


def _individual_pages(state: PaginationState, window: PageWindow):
    for page in window.pages:
        yield PaginationItem.individual_page(page, is_current=page == state.page_index)


def _next(state: PaginationState, window: PageWindow):
    yield PaginationItem.next(state.page_index)


def _last(state: PaginationState, window: PageWindow):
    yield PaginationItem.last(state.total_pages)


# Display order. Each stage is decided on its own.
PIPELINE: Tuple[Tuple[Predicate, Emitter], ...] = (
    (policy.shows_total_summary, _total_summary),
    (policy.shows_first, _first),
    (policy.shows_previous, _previous),
    (policy.shows_individual_pages, _individual_pages),
    (policy.shows_next, _next),
    (policy.shows_last, _last),
)


class SequenceBuilder:
    """Builds navigation items from a PaginationState."""

    def __init__(self, pipeline: Tuple[Tuple[Predicate, Emitter], ...] = PIPELINE):
        self.pipeline = pipeline

    def build(self, state: PaginationState) -> List[PaginationItem]:
        """Return the ordered items for ``state``; empty when there are no records."""
        if state.total_records == 0:
            return []

        window = compute_window(
            state.page_index, state.total_pages, state.individual_pages_displayed_count
        )

        items: List[PaginationItem] = []
        for include, emit in self.pipeline:
            if include(state):
                items.extend(emit(state, window))
        return items


_default_builder = SequenceBuilder()


def build_sequence(state: PaginationState) -> List[PaginationItem]:
    """Build the navigation sequence with the default pipeline."""
    return _default_builder.build(state)
