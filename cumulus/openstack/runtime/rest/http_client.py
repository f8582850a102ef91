"""HTTP client helper."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.exceptions import (
    HttpResponseError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestResponse:
    """Fully read HTTP response: status, headers, raw body and final URL."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str = ""

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            MalformedResponseError: If the body is not valid JSON
        """
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise MalformedResponseError(f"Response from {self.url} is not valid JSON: {e}") from e


ResponseHook = Callable[[RestResponse], Awaitable[None] | None]


class HTTPClient:
    """Async HTTP client wrapper.

    Every request is read to completion and returned as a RestResponse.
    404 raises NotFoundError, any other status >= 400 raises
    HttpResponseError, and connection-level failures raise TransportError.
    Nothing is retried here.
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every response before status checks."""
        self._response_hooks.append(hook)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        data: bytes | str | None = None,
        json: Any = None,
    ) -> RestResponse:
        """Issue one request and return the fully read response."""
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        try:
            async with self.session.request(
                method, url, params=params, headers=headers, data=data, json=json
            ) as response:
                body = await response.read()
                result = RestResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                    url=str(response.url),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e

        logger.debug(
            "http_response",
            extra={"http_method": method, "url": result.url, "status": result.status},
        )
        await self._run_hooks(result)

        if result.status == 404:
            raise NotFoundError(f"{method} {result.url} returned 404", url=result.url)
        if result.status >= 400:
            raise HttpResponseError(
                f"{method} {result.url} returned {result.status}",
                status_code=result.status,
                url=result.url,
            )
        return result

    async def _run_hooks(self, response: RestResponse) -> None:
        for hook in self._response_hooks:
            try:
                outcome = hook(response)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.warning("Response hook failed", exc_info=True)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
