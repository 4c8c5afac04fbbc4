"""Exceptions raised while generating and rendering pagers."""

from typing import Any, Dict, Optional


class PagerException(Exception):
    """Base exception for pager errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(PagerException, ValueError):
    """Pagination state or display options are inconsistent."""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)


class RenderError(PagerException):
    """A link renderer failed to render one navigation item."""

    def __init__(self, message: str, item: Any = None, **details: Any):
        self.item = item
        if item is not None:
            details.setdefault("kind", item.kind.value)
            details.setdefault("target_page", item.target_page)
        super().__init__(message=message, details=details)
