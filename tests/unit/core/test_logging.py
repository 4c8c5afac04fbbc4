"""Unit tests for logging helpers."""

import json
import logging

import pytest

from pagenav.core.logging import (EventJsonFormatter, build_formatter,
                                  get_logger, get_logger_with_context,
                                  log_event, setup_logging)


@pytest.mark.unit
class TestLogEvent:
    """Test log_event."""

    def test_message_includes_fields(self, caplog):
        logger = get_logger("pagenav.test")

        with caplog.at_level(logging.INFO):
            log_event(logger, "info", "pager_built", items=7, page_index=0)

        record = caplog.records[-1]
        assert record.message.startswith("pager_built: ")
        assert json.loads(record.message.split(": ", 1)[1]) == {"items": 7, "page_index": 0}
        assert record.event == "pager_built"
        assert record.items == 7

    def test_event_without_fields(self, caplog):
        with caplog.at_level(logging.INFO):
            log_event(get_logger("pagenav.test"), "info", "started")

        assert caplog.records[-1].message == "started"

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
        ],
    )
    def test_levels(self, caplog, level, expected):
        with caplog.at_level(logging.DEBUG):
            log_event(get_logger("pagenav.test"), level, "evt")

        assert caplog.records[-1].levelno == expected


@pytest.mark.unit
class TestLoggerWithContext:
    """Test get_logger_with_context."""

    def test_context_is_attached(self, caplog):
        logger = get_logger_with_context("pagenav.test", request_id="abc123")

        with caplog.at_level(logging.INFO):
            logger.info("hello")

        assert caplog.records[-1].request_id == "abc123"

    def test_call_extra_is_merged(self, caplog):
        logger = get_logger_with_context("pagenav.test", request_id="abc123")

        with caplog.at_level(logging.INFO):
            logger.info("hello", extra={"page_index": 3})

        record = caplog.records[-1]
        assert record.request_id == "abc123"
        assert record.page_index == 3


@pytest.mark.unit
class TestEventJsonFormatter:
    """Test the JSON formatter."""

    def _format(self, record):
        formatter = EventJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        return json.loads(formatter.format(record))

    def test_adds_service_fields(self):
        record = logging.LogRecord(
            "pagenav.test", logging.INFO, __file__, 1, "hello", None, None
        )
        record.request_id = "abc123"

        payload = self._format(record)

        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["request_id"] == "abc123"
        assert "service" in payload
        assert "timestamp" in payload

    def test_event_record_uses_event_name_as_message(self, caplog):
        with caplog.at_level(logging.WARNING):
            log_event(
                get_logger("pagenav.test"),
                "warning",
                "render_failed",
                kind="last",
                target_page=9,
                policy="placeholder",
            )

        payload = self._format(caplog.records[-1])

        assert payload["message"] == "render_failed"
        assert payload["event"] == "render_failed"
        assert payload["kind"] == "last"
        assert payload["target_page"] == 9
        assert payload["policy"] == "placeholder"


@pytest.mark.unit
class TestSetupLogging:
    """Test root logger configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_output(self):
        setup_logging(log_level="DEBUG", log_json=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, EventJsonFormatter)

    def test_plain_output(self):
        assert not isinstance(build_formatter(False), EventJsonFormatter)
