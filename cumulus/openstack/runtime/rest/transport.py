"""REST transport bound to one service endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .http_client import HTTPClient, ResponseHook, RestResponse

if TYPE_CHECKING:
    from ...config import CloudConfig

DEFAULT_HEADERS = {"Accept": "application/json"}


class RESTTransport:
    """Thin wrapper over HTTPClient that adds endpoint-wide headers.

    A transport is bound to one base URL (one zone of one service). The
    auth token, if any, is obtained elsewhere and passed through verbatim.
    """

    def __init__(
        self,
        base_url: str,
        *,
        auth_token: str | None = None,
        user_agent: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._headers: dict[str, str] = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent
        if auth_token:
            self._headers["X-Auth-Token"] = auth_token

    @classmethod
    def from_config(cls, config: CloudConfig, base_url: str) -> RESTTransport:
        return cls(
            base_url,
            auth_token=config.auth_token,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> RestResponse:
        """Send a request; bytes/str bodies go out raw, anything else as JSON."""
        merged = {**self._headers, **(headers or {})}
        data: bytes | str | None = None
        json_body: Any = None
        if isinstance(body, (bytes, str)):
            data = body
        elif body is not None:
            json_body = body
        return await self._http.request(
            method, path, params=params, headers=merged, data=data, json=json_body
        )

    async def get(self, path: str, **kwargs: Any) -> RestResponse:
        return await self.request("GET", path, **kwargs)

    async def head(self, path: str, **kwargs: Any) -> RestResponse:
        return await self.request("HEAD", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> RestResponse:
        return await self.request("PUT", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> RestResponse:
        return await self.request("POST", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> RestResponse:
        return await self.request("DELETE", path, **kwargs)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
