"""Swift container listing endpoint definition and adapter."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from cumulus.openstack.models import ObjectList
from cumulus.openstack.runtime.pagination import PaginationOptions
from cumulus.openstack.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse

from ..reconstruct import ObjectListReconstructor, RequestContext


def container_path(params: dict[str, Any]) -> str:
    return f"/{quote(params['container'], safe='')}"


def build_list_query(params: dict[str, Any]) -> dict[str, Any]:
    options: PaginationOptions = params.get("options") or PaginationOptions()
    return {"format": "json", **options.to_query()}


LIST_SPEC = RestEndpointSpec(
    id="list_objects",
    method="GET",
    build_path=container_path,
    build_query=build_list_query,
)


class ObjectListAdapter(ResponseAdapter):
    """Reconstructs an ObjectList from the listing body and its request."""

    def parse(self, response: RestResponse, params: dict[str, Any]) -> ObjectList:
        context = RequestContext(endpoint=response.url, container=params.get("container"))
        reconstruct = ObjectListReconstructor.for_request(context)
        # empty containers may answer 204 with no body
        body = b"[]" if response.status == 204 else response.body
        return reconstruct(body, response.headers)
