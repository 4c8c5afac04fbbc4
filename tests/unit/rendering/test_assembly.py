"""Unit tests for ordered pager rendering."""

import asyncio
import logging

import pytest

from pagenav.exceptions import RenderError
from pagenav.models.pager import (ItemKind, LinkStyle, PaginationItem,
                                  RenderedLink, RenderFailurePolicy)
from pagenav.pager.builder import build_sequence
from pagenav.rendering.assembly import (current_page_label, render_items,
                                        render_pager)
from pagenav.rendering.base import LinkRenderer
from pagenav.rendering.links import UrlLinkRenderer


class SlowFirstRenderer(LinkRenderer):
    """Finishes earlier items last, to check ordering."""

    async def render(self, item, style):
        delay = 0.02 if item.kind is ItemKind.TOTAL_SUMMARY else 0
        await asyncio.sleep(delay)
        return RenderedLink(kind=item.kind, text=item.kind.value, href="/x")


@pytest.mark.unit
class TestCurrentPageLabel:
    """Test current_page_label."""

    def test_label(self):
        label = current_page_label(PaginationItem.individual_page(6, is_current=True))

        assert label.text == "7"
        assert label.href is None
        assert label.is_current is True
        assert label.target_page == 6


@pytest.mark.unit
class TestRenderItems:
    """Test render_items."""

    @pytest.mark.asyncio
    async def test_empty_sequence(self, recording_renderer):
        assert await render_items([], recording_renderer, LinkStyle.ROUTE) == []
        assert recording_renderer.calls == []

    @pytest.mark.asyncio
    async def test_current_page_never_reaches_renderer(
        self, scenario_b_state, recording_renderer
    ):
        items = build_sequence(scenario_b_state)

        links = await render_items(items, recording_renderer, LinkStyle.ROUTE)

        assert len(links) == len(items)
        assert all(not call.is_current for call in recording_renderer.calls)
        assert len(recording_renderer.calls) == len(items) - 1

        current = [link for link in links if link.is_current]
        assert len(current) == 1
        assert current[0].target_page == 6
        assert current[0].href is None

    @pytest.mark.asyncio
    async def test_results_keep_sequence_order(self, scenario_b_state):
        items = build_sequence(scenario_b_state)

        links = await render_items(items, SlowFirstRenderer(), LinkStyle.ROUTE)

        assert [link.kind for link in links] == [item.kind for item in items]

    @pytest.mark.asyncio
    async def test_style_is_passed_through(self, scenario_b_state, recording_renderer):
        items = build_sequence(scenario_b_state)

        links = await render_items(items, recording_renderer, LinkStyle.ACTION)

        assert links[-1].href == "/action/9"

    @pytest.mark.asyncio
    async def test_abort_raises_first_failure_in_order(
        self, scenario_b_state, failing_renderer, caplog
    ):
        items = build_sequence(scenario_b_state)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RenderError) as exc_info:
                await render_items(
                    items, failing_renderer, LinkStyle.ROUTE, RenderFailurePolicy.ABORT
                )

        assert exc_info.value.item == PaginationItem.previous(6)
        assert any("render_failed" in r.message for r in caplog.records)

    @pytest.mark.asyncio
    async def test_placeholder_keeps_going(
        self, scenario_b_state, failing_renderer, caplog
    ):
        items = build_sequence(scenario_b_state)

        with caplog.at_level(logging.WARNING):
            links = await render_items(
                items,
                failing_renderer,
                LinkStyle.ROUTE,
                RenderFailurePolicy.PLACEHOLDER,
            )

        assert len(links) == len(items)
        failed = [link for link in links if link.error]
        assert [link.kind for link in failed] == [ItemKind.PREVIOUS, ItemKind.LAST]
        assert failed[0].href is None
        assert failed[0].text == "6"
        assert failed[1].text == "10"

        failures = [r for r in caplog.records if "render_failed" in r.message]
        assert len(failures) == 2

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, scenario_b_state):
        class BrokenRenderer(LinkRenderer):
            async def render(self, item, style):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await render_items(
                build_sequence(scenario_b_state),
                BrokenRenderer(),
                LinkStyle.ROUTE,
                RenderFailurePolicy.PLACEHOLDER,
            )


@pytest.mark.unit
class TestRenderPager:
    """Test render_pager end to end with the URL renderer."""

    @pytest.mark.asyncio
    async def test_scenario_a(self, scenario_a_state):
        links = await render_pager(scenario_a_state, UrlLinkRenderer("/posts"))

        assert [link.text for link in links] == [
            "Page 1 of 5 (50 total records)",
            "1",
            "2",
            "3",
            "4",
            "5",
            "Next",
        ]
        assert [link.href for link in links] == [
            None,
            None,
            "/posts/page/2",
            "/posts/page/3",
            "/posts/page/4",
            "/posts/page/5",
            "/posts/page/2",
        ]

    @pytest.mark.asyncio
    async def test_uses_state_link_style(self, make_state):
        state = make_state(page_index=1, total_pages=3, link_style=LinkStyle.ACTION)

        links = await render_pager(state, UrlLinkRenderer("/posts"))

        assert links[-1].href == "/posts?page=3"

    @pytest.mark.asyncio
    async def test_no_records(self, make_state):
        state = make_state(page_index=0, total_pages=0, total_records=0)

        assert await render_pager(state, UrlLinkRenderer("/posts")) == []
