"""Cursor-based pagination engine.

The engine turns a "fetch one page" function into a lazy, forward-only
sequence of items. Callers drive it by iterating; each step issues at most
one backend call and nothing is fetched ahead.

Flow:
    engine.open(kind, scope)      -> PageSource  (zone client resolved here)
    source.next(cursor, options)  -> Page        (one backend call)
    engine.list(kind, scope, ...) -> PagedIterable over the items
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from time import perf_counter
from typing import Any, Generic

from ...core.enums import ResourceKind
from ...core.exceptions import ConfigurationError
from .definitions import ClientResolver, Page, PageFetcher, PaginationOptions, T
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete


class PageSource(Generic[T]):
    """Fetches pages of one resource kind with one zone-scoped client.

    The client is bound at construction and owned by this source; do not
    share a source across threads or tasks without external locking.
    """

    def __init__(
        self,
        *,
        kind: ResourceKind,
        scope: str | None,
        client: Any,
        fetcher: PageFetcher,
    ) -> None:
        self.kind = kind
        self.scope = scope
        self._client = client
        self._fetch = fetcher
        self._calls = 0

    @property
    def client(self) -> Any:
        return self._client

    @property
    def calls(self) -> int:
        """Number of backend calls issued so far."""
        return self._calls

    async def next(
        self,
        cursor: str | None = None,
        options: PaginationOptions | None = None,
    ) -> Page[T]:
        """Fetch one page.

        Args:
            cursor: Resume token from a previous page; overrides options.marker
            options: Listing options (marker, limit, extra query)

        Raises:
            TransportError: On network failure (not retried)
            NotFoundError: If the listed scope no longer exists
        """
        opts = options or PaginationOptions()
        if cursor is not None:
            opts = opts.with_marker(cursor)

        page_index = self._calls
        self._calls += 1
        start = perf_counter()
        try:
            page = await self._fetch(self._client, opts)
        except Exception as e:
            log_page_error(
                kind=self.kind.value,
                scope=self.scope,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_page_fetched(
            kind=self.kind.value,
            scope=self.scope,
            page_index=page_index,
            items=len(page.items),
            has_next=page.has_next,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page


class PagedIterable(Generic[T]):
    """Lazy sequence of items across pages. Not restartable.

    The first fetch uses the caller's options verbatim; every later fetch
    uses only the previous page's next token as its marker. Iteration ends
    on the first page without a next token. Iterating a second time raises
    RuntimeError; call ``list()`` again for a fresh sequence.
    """

    def __init__(self, source: PageSource[T], options: PaginationOptions | None = None) -> None:
        self._source = source
        self._options = options
        self._started = False

    @property
    def source(self) -> PageSource[T]:
        return self._source

    def pages(self) -> AsyncIterator[Page[T]]:
        """Iterate whole pages instead of items."""
        self._claim()
        return self._iter_pages()

    def __aiter__(self) -> AsyncIterator[T]:
        self._claim()
        return self._iter_items()

    async def to_list(self) -> list[T]:
        """Consume the whole sequence into a list."""
        return [item async for item in self]

    def _claim(self) -> None:
        if self._started:
            raise RuntimeError(
                f"Listing of {self._source.kind.value} already consumed; open a new one"
            )
        self._started = True

    async def _iter_pages(self) -> AsyncIterator[Page[T]]:
        pages = 0
        total = 0
        page = await self._source.next(options=self._options)
        while True:
            pages += 1
            total += len(page.items)
            yield page
            if page.next_token is None:
                break
            page = await self._source.next(page.next_token)

        log_pagination_complete(
            kind=self._source.kind.value,
            scope=self._source.scope,
            pages=pages,
            total_items=total,
        )

    async def _iter_items(self) -> AsyncIterator[T]:
        async for page in self._iter_pages():
            for item in page.items:
                yield item


class PaginationEngine:
    """Opens page sources through a resolver and a kind -> fetcher table.

    Args:
        resolver: Maps (scope, kind) to a zone-scoped client
        fetchers: How to fetch one page for each resource kind
    """

    def __init__(
        self,
        resolver: ClientResolver,
        fetchers: Mapping[ResourceKind, PageFetcher],
    ) -> None:
        self._resolver = resolver
        self._fetchers = dict(fetchers)

    @property
    def kinds(self) -> set[ResourceKind]:
        return set(self._fetchers)

    def open(self, kind: ResourceKind, scope: str | None = None) -> PageSource[Any]:
        """Bind a page source to one zone.

        The zone client is resolved on every call, never cached here, since
        independent iterations may target different zones.

        Raises:
            ConfigurationError: If the kind has no fetcher or the scope is unknown
        """
        fetcher = self._fetchers.get(kind)
        if fetcher is None:
            raise ConfigurationError(f"No page fetcher registered for '{kind.value}'")
        client = self._resolver(scope, kind)
        return PageSource(kind=kind, scope=scope, client=client, fetcher=fetcher)

    def list(
        self,
        kind: ResourceKind,
        scope: str | None = None,
        options: PaginationOptions | None = None,
    ) -> PagedIterable[Any]:
        """Lazy item sequence; scope errors surface here, before any fetch."""
        return PagedIterable(self.open(kind, scope), options)
