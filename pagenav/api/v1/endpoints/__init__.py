"""API routes package."""

from . import health, pager

__all__ = ["health", "pager"]
