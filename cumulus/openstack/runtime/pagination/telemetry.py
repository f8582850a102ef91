"""Structured logging for pagination.

Emits one record per fetched page, per failed fetch and per completed
listing, with the identifying fields in ``extra``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    kind: str,
    scope: str | None,
    page_index: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched page.

    Args:
        kind: Resource kind being listed
        scope: Zone/region the listing is bound to
        page_index: Zero-based index of the page within this iteration
        items: Number of items on the page
        has_next: Whether the page carried a next-page cursor
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "kind": kind,
            "scope": scope,
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    kind: str,
    scope: str | None,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch that raised."""
    logger.error(
        "page_error",
        extra={
            "kind": kind,
            "scope": scope,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(
    *,
    kind: str,
    scope: str | None,
    pages: int,
    total_items: int,
) -> None:
    logger.info(
        "pagination_complete",
        extra={"kind": kind, "scope": scope, "pages": pages, "total_items": total_items},
    )
