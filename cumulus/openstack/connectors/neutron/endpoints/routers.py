"""Neutron router endpoint definitions and adapters.

Router listings yield ReferenceWithName; the full Router is only built by
``get``.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from cumulus.openstack.core import MalformedResponseError, NotFoundPolicy
from cumulus.openstack.models import Link, ReferenceWithName, Router, next_marker
from cumulus.openstack.runtime.pagination import Page, PaginationOptions
from cumulus.openstack.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse


class _RoutersPayload(BaseModel):
    routers: list[dict[str, Any]]
    routers_links: list[Link] = []


class _RouterPayload(BaseModel):
    router: dict[str, Any]


def build_list_query(params: dict[str, Any]) -> dict[str, Any]:
    options: PaginationOptions = params.get("options") or PaginationOptions()
    return options.to_query()


LIST_SPEC = RestEndpointSpec(
    id="list_routers",
    method="GET",
    build_path=lambda p: "/routers",
    build_query=build_list_query,
)

GET_SPEC = RestEndpointSpec(
    id="get_router",
    method="GET",
    build_path=lambda p: f"/routers/{quote(p['router_id'], safe='')}",
    not_found=NotFoundPolicy.NONE,
)


class ListAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> Page[ReferenceWithName]:
        zone = params.get("zone")
        try:
            payload = _RoutersPayload.model_validate(response.json())
            routers = tuple(
                ReferenceWithName.model_validate(
                    {
                        "id": row.get("id"),
                        "name": row.get("name"),
                        "tenant_id": row.get("tenant_id"),
                        "zone": zone,
                    }
                )
                for row in payload.routers
            )
        except ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected router listing from {response.url}: {e}"
            ) from e
        return Page(items=routers, next_token=next_marker(payload.routers_links))


class GetAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> Router:
        try:
            payload = _RouterPayload.model_validate(response.json())
            return Router.model_validate({**payload.router, "zone": params.get("zone")})
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected router body from {response.url}: {e}") from e
