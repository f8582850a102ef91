"""Pagination data structures.

This module defines the values exchanged between the pagination engine and
the per-resource page fetchers: request options, pages and the fetcher and
resolver call signatures.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from ...core.enums import ResourceKind

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationOptions:
    """Per-call listing options.

    Attributes:
        marker: Resume point; backend-opaque, never inspected here
        limit: Maximum items per page (None = backend default)
        extra: Additional query parameters passed through verbatim
    """

    marker: str | None = None
    limit: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit <= 0:
            raise ValueError("limit must be positive")

    def with_marker(self, marker: str) -> PaginationOptions:
        return replace(self, marker=marker)

    def to_query(self) -> dict[str, Any]:
        query = dict(self.extra)
        if self.marker is not None:
            query["marker"] = self.marker
        if self.limit is not None:
            query["limit"] = self.limit
        return query


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing.

    Attributes:
        items: Items in server order
        next_token: Cursor for the following page; None marks the last page
    """

    items: tuple[T, ...] = ()
    next_token: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next_token is not None

    def __len__(self) -> int:
        return len(self.items)


# Fetches one page with a zone-scoped client.
PageFetcher = Callable[[Any, PaginationOptions], Awaitable[Page[Any]]]

# Resolves (scope, kind) to a zone-scoped client; raises ConfigurationError.
ClientResolver = Callable[[str | None, ResourceKind], Any]
