"""Neutron port endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from cumulus.openstack.core import MalformedResponseError, NotFoundPolicy
from cumulus.openstack.models import Link, Port, next_marker
from cumulus.openstack.runtime.pagination import Page, PaginationOptions
from cumulus.openstack.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse


class _PortsPayload(BaseModel):
    ports: list[dict[str, Any]]
    ports_links: list[Link] = []


class _PortPayload(BaseModel):
    port: dict[str, Any]


def build_list_query(params: dict[str, Any]) -> dict[str, Any]:
    options: PaginationOptions = params.get("options") or PaginationOptions()
    return options.to_query()


LIST_SPEC = RestEndpointSpec(
    id="list_ports",
    method="GET",
    build_path=lambda p: "/ports",
    build_query=build_list_query,
)

GET_SPEC = RestEndpointSpec(
    id="get_port",
    method="GET",
    build_path=lambda p: f"/ports/{quote(p['port_id'], safe='')}",
    not_found=NotFoundPolicy.NONE,
)


class ListAdapter(ResponseAdapter):
    """Parses ``{"ports": [...], "ports_links": [...]}`` into a page of ports."""

    def parse(self, response: RestResponse, params: dict[str, Any]) -> Page[Port]:
        zone = params.get("zone")
        try:
            payload = _PortsPayload.model_validate(response.json())
            ports = tuple(Port.model_validate({**row, "zone": zone}) for row in payload.ports)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected port listing from {response.url}: {e}") from e
        return Page(items=ports, next_token=next_marker(payload.ports_links))


class GetAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> Port:
        try:
            payload = _PortPayload.model_validate(response.json())
            return Port.model_validate({**payload.port, "zone": params.get("zone")})
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected port body from {response.url}: {e}") from e
