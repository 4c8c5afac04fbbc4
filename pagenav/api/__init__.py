"""HTTP API for pager generation."""
