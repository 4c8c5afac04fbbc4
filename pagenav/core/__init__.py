"""Core utilities package."""

from pagenav.exceptions import ConfigurationError, PagerException, RenderError
from .logging import (LoggerAdapter, get_logger, get_logger_with_context,
                      log_event, setup_logging)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggerAdapter",
    "get_logger_with_context",
    "log_event",
    "PagerException",
    "ConfigurationError",
    "RenderError",
]
