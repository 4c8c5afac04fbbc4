"""Logging configuration for the pagination navigation service."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from pagenav.core.config import settings

# Attributes set by log_event callers and the request middleware.
EVENT_FIELDS = ("event", "request_id", "kind", "target_page", "policy", "status_code")


class EventJsonFormatter(JsonFormatter):
    """JSON formatter for pager events.

    Records emitted through :func:`log_event` carry their fields as record
    attributes, so the JSON ``message`` is reduced to the event name instead
    of repeating those fields as an embedded JSON string.
    """

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.app_name
        log_record["environment"] = settings.environment.value

        for name in EVENT_FIELDS:
            if hasattr(record, name):
                log_record[name] = getattr(record, name)
        if hasattr(record, "event"):
            log_record["message"] = record.event


def build_formatter(log_json: bool) -> logging.Formatter:
    if log_json:
        return EventJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    return logging.Formatter(settings.log_format)


def setup_logging(log_level: Optional[str] = None, log_json: Optional[bool] = None) -> None:
    """Install a single stdout handler on the root logger.

    Level and output format default to the ``PAGENAV_LOG_LEVEL`` and
    ``PAGENAV_LOG_JSON`` settings.
    """
    level = log_level or settings.log_level.value
    use_json = settings.log_json if log_json is None else log_json

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(build_formatter(use_json))
    root_logger.addHandler(handler)

    # uvicorn's access log duplicates request_completed
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    log_event(get_logger(__name__), "info", "logging_configured", log_level=level, log_json=use_json)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges bound context into every record."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Process log message and add context."""
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra", {}))
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context) -> LoggerAdapter:
    """Get a logger with additional context."""
    logger = get_logger(name)
    return LoggerAdapter(logger, context)


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def log_event(logger: logging.Logger, level: str, event: str, **kwargs) -> None:
    """Log a structured event."""
    extra = {"event": event, **kwargs}

    message = f"{event}: {json.dumps(kwargs, default=str)}" if kwargs else event

    logger.log(_LEVELS.get(level, logging.INFO), message, extra=extra)
