"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.enums import NotFoundPolicy
from ...core.exceptions import NotFoundError
from .http_client import RestResponse
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "HEAD" | "PUT" | "POST" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # bytes/str are sent raw, anything else is JSON-encoded
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    not_found: NotFoundPolicy = NotFoundPolicy.PROPAGATE


class ResponseAdapter:
    def parse(self, response: RestResponse, params: dict[str, Any]) -> Any:
        return response


class TrueAdapter(ResponseAdapter):
    """For operations whose only result is success."""

    def parse(self, response: RestResponse, params: dict[str, Any]) -> bool:
        return True


class NoneAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> None:
        return None


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    @property
    def transport(self) -> RESTTransport:
        return self._t

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        try:
            response = await self._t.request(
                spec.method.upper(), path, params=query, headers=headers, body=body
            )
        except NotFoundError:
            if spec.not_found == NotFoundPolicy.PROPAGATE:
                raise
            logger.debug(
                "not_found_fallback",
                extra={"endpoint_id": spec.id, "policy": spec.not_found.value},
            )
            return spec.not_found.fallback()

        return adapter.parse(response, params)
