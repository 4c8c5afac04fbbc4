"""Pagination navigation sequence generation."""

from .builder import SequenceBuilder, build_sequence
from .window import PageWindow, compute_window

__all__ = [
    "SequenceBuilder",
    "build_sequence",
    "PageWindow",
    "compute_window",
]
