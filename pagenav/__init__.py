"""Pagination navigation sequence generator."""
