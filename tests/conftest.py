"""Pytest configuration and shared fixtures for pagenav tests."""

from typing import Any, List

import pytest
from fastapi.testclient import TestClient

from pagenav.exceptions import RenderError
from pagenav.models.pager import (ItemKind, LinkStyle, PaginationItem,
                                  PaginationState, RenderedLink)
from pagenav.rendering.base import LinkRenderer

# ============================================================================
# State Fixtures
# ============================================================================


@pytest.fixture
def make_state():
    """Factory for PaginationState with every toggle on by default."""

    def _make(
        page_index: int = 0,
        total_pages: int = 10,
        total_records: int = None,
        width: int = 5,
        **options: Any,
    ) -> PaginationState:
        if total_records is None:
            total_records = total_pages * 10
        return PaginationState(
            page_index=page_index,
            total_records=total_records,
            total_pages=total_pages,
            individual_pages_displayed_count=width,
            **options,
        )

    return _make


@pytest.fixture
def scenario_a_state(make_state):
    """First page of five, window of five."""
    return make_state(page_index=0, total_pages=5, total_records=50, width=5)


@pytest.fixture
def scenario_b_state(make_state):
    """Page 6 of ten, window of five."""
    return make_state(page_index=6, total_pages=10, total_records=100, width=5)


# ============================================================================
# Renderer Fixtures
# ============================================================================


class RecordingRenderer(LinkRenderer):
    """Renderer that records calls and fails for selected kinds."""

    def __init__(self, fail_kinds=()):
        self.calls: List[PaginationItem] = []
        self.fail_kinds = set(fail_kinds)

    async def render(self, item: PaginationItem, style: LinkStyle) -> RenderedLink:
        self.calls.append(item)
        if item.kind in self.fail_kinds:
            raise RenderError(f"cannot render {item.kind.value}", item=item)
        target = "summary" if item.target_page is None else item.target_page
        return RenderedLink(
            kind=item.kind,
            text=f"{item.kind.value}:{target}",
            href=f"/{style.value}/{target}",
            target_page=item.target_page,
        )


@pytest.fixture
def recording_renderer():
    """Renderer that always succeeds."""
    return RecordingRenderer()


@pytest.fixture
def failing_renderer():
    """Renderer that fails for Previous and Last items."""
    return RecordingRenderer(fail_kinds=(ItemKind.PREVIOUS, ItemKind.LAST))


# ============================================================================
# API Test Client Fixtures
# ============================================================================


@pytest.fixture
def test_client():
    """Provide a test client for the application."""
    from pagenav.main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def app():
    """The FastAPI application, for dependency overrides."""
    from pagenav.main import app

    return app


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset the settings cache between tests."""
    from pagenav.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Markers
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
