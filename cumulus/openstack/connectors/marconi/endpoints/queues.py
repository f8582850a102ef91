"""Marconi queue endpoint definitions and adapters.

Each operation states its own 404 treatment:

    create, delete, exists, set_metadata -> False
    get_metadata                         -> {}
    get_stats                            -> None
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from cumulus.openstack.core import MalformedResponseError, NotFoundPolicy
from cumulus.openstack.models import QueueStats
from cumulus.openstack.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse


def queue_path(params: dict[str, Any]) -> str:
    return f"/queues/{quote(params['name'], safe='')}"


def client_headers(params: dict[str, Any]) -> dict[str, str]:
    return {"Client-ID": params["client_id"]}


CREATE_SPEC = RestEndpointSpec(
    id="create_queue",
    method="PUT",
    build_path=queue_path,
    build_headers=client_headers,
    not_found=NotFoundPolicy.FALSE,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_queue",
    method="DELETE",
    build_path=queue_path,
    build_headers=client_headers,
    not_found=NotFoundPolicy.FALSE,
)

EXISTS_SPEC = RestEndpointSpec(
    id="queue_exists",
    method="GET",
    build_path=queue_path,
    build_headers=client_headers,
    not_found=NotFoundPolicy.FALSE,
)

SET_METADATA_SPEC = RestEndpointSpec(
    id="set_queue_metadata",
    method="PUT",
    build_path=lambda p: f"{queue_path(p)}/metadata",
    build_body=lambda p: dict(p["metadata"]),
    build_headers=client_headers,
    not_found=NotFoundPolicy.FALSE,
)

GET_METADATA_SPEC = RestEndpointSpec(
    id="get_queue_metadata",
    method="GET",
    build_path=lambda p: f"{queue_path(p)}/metadata",
    build_headers=client_headers,
    not_found=NotFoundPolicy.EMPTY,
)

GET_STATS_SPEC = RestEndpointSpec(
    id="get_queue_stats",
    method="GET",
    build_path=lambda p: f"{queue_path(p)}/stats",
    build_headers=client_headers,
    not_found=NotFoundPolicy.NONE,
)


class MetadataAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> dict[str, Any]:
        data = response.json()
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Queue metadata from {response.url} is not an object")
        return data


class StatsAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> QueueStats:
        try:
            return QueueStats.model_validate(response.json())
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected queue stats from {response.url}: {e}") from e
