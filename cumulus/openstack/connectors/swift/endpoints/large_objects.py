"""Swift static large object endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from cumulus.openstack.core import MalformedResponseError, NotFoundPolicy
from cumulus.openstack.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse

from ..manifest import build_manifest, normalize_etag

OBJECT_META_PREFIX = "X-Object-Meta-"


def object_path(params: dict[str, Any]) -> str:
    return f"/{quote(params['container'], safe='')}/{quote(params['name'], safe='/')}"


def build_metadata_headers(params: dict[str, Any]) -> dict[str, str]:
    metadata: dict[str, str] = params.get("metadata") or {}
    return {f"{OBJECT_META_PREFIX}{key}": value for key, value in metadata.items()}


REPLACE_SPEC = RestEndpointSpec(
    id="replace_manifest",
    method="PUT",
    build_path=object_path,
    build_query=lambda p: {"multipart-manifest": "put"},
    build_body=lambda p: build_manifest(p["segments"]),
    build_headers=lambda p: {
        "Content-Type": "application/json",
        **build_metadata_headers(p),
    },
)

# Removes the manifest and every segment it references; absent is success.
DELETE_SPEC = RestEndpointSpec(
    id="delete_large_object",
    method="DELETE",
    build_path=object_path,
    build_query=lambda p: {"multipart-manifest": "delete"},
    not_found=NotFoundPolicy.NONE,
)


class ETagAdapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> str:
        etag = response.header("ETag")
        if not etag:
            raise MalformedResponseError(f"No ETag in manifest response from {response.url}")
        return normalize_etag(etag)
