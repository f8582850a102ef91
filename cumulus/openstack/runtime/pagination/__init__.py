"""Cursor-based pagination layer.

Architecture:
    - definitions.py: PaginationOptions, Page and the fetcher/resolver signatures
    - engine.py: PaginationEngine, PageSource and PagedIterable
    - telemetry.py: Structured logging

Usage:
    A service API builds an engine from a client resolver and a mapping of
    resource kind to page fetcher, then exposes ``engine.list(kind, zone)``.
"""

from __future__ import annotations

from .definitions import ClientResolver, Page, PageFetcher, PaginationOptions
from .engine import PagedIterable, PageSource, PaginationEngine

__all__ = [
    "ClientResolver",
    "Page",
    "PageFetcher",
    "PageSource",
    "PagedIterable",
    "PaginationEngine",
    "PaginationOptions",
]
