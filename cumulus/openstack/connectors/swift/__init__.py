"""Swift (object storage) connector."""

from .api import ObjectApi, StaticLargeObjectApi, SwiftApi
from .manifest import build_manifest, expected_manifest_etag
from .reconstruct import (
    ObjectListReconstructor,
    RequestContext,
    parse_container_from_headers,
    reconstruct_object_list,
)

__all__ = [
    "ObjectApi",
    "ObjectListReconstructor",
    "RequestContext",
    "StaticLargeObjectApi",
    "SwiftApi",
    "build_manifest",
    "expected_manifest_etag",
    "parse_container_from_headers",
    "reconstruct_object_list",
]
