"""Container listing reconstruction.

A Swift container listing (``GET /{container}?format=json``) returns a JSON
array of lightweight rows that carry neither the container nor the object
URI. Both come from the request: the container name from the caller, the
base URI from the request endpoint with its query stripped. Container
metadata comes from the response headers. Delimiter listings may also carry
``{"subdir": ...}`` pseudo-directory rows, which are kept apart from objects.

The functions here are pure: everything they need is passed in, so they
can be exercised with synthetic inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from cumulus.openstack.core import MalformedResponseError, MissingContextError
from cumulus.openstack.models import Container, ObjectList, PayloadInfo, SwiftObject

CONTAINER_META_PREFIX = "x-container-meta-"


class _ObjectRow(BaseModel):
    name: str
    etag: str = Field(alias="hash")
    size: int = Field(alias="bytes", ge=0)
    content_type: str | None = None
    last_modified: datetime


class _SubdirRow(BaseModel):
    subdir: str


_ROWS = TypeAdapter(list[_ObjectRow | _SubdirRow])


@dataclass(frozen=True)
class RequestContext:
    """What the reconstructor needs from the originating request.

    Attributes:
        endpoint: Full request URI, query string included
        container: Container name the caller listed
    """

    endpoint: str
    container: str | None = None


def strip_query(uri: str) -> str:
    index = uri.find("?")
    return uri if index == -1 else uri[:index]


def _int_header(headers: Mapping[str, str], key: str) -> int | None:
    value = headers.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise MalformedResponseError(f"Header {key} is not an integer: {value!r}") from e


def parse_container_from_headers(name: str, headers: Mapping[str, str]) -> Container:
    """Container metadata from ``X-Container-*`` response headers."""
    lowered = {k.lower(): v for k, v in headers.items()}
    metadata = {
        k[len(CONTAINER_META_PREFIX):]: v
        for k, v in lowered.items()
        if k.startswith(CONTAINER_META_PREFIX)
    }
    return Container(
        name=name,
        object_count=_int_header(lowered, "x-container-object-count"),
        bytes_used=_int_header(lowered, "x-container-bytes-used"),
        metadata=metadata,
    )


@dataclass(frozen=True)
class ObjectListReconstructor:
    """Turns one listing response into an ObjectList.

    Built per response by ``for_request`` and immutable afterwards.
    """

    container: str
    container_uri: str

    @classmethod
    def for_request(cls, context: RequestContext) -> ObjectListReconstructor:
        """Bind the container name and base URI of one request.

        Raises:
            MissingContextError: If the context carries no container name
        """
        if not context.container:
            raise MissingContextError(
                f"Listing request to {context.endpoint} carries no container name"
            )
        return cls(container=context.container, container_uri=strip_query(context.endpoint))

    def to_object(self, row: _ObjectRow) -> SwiftObject:
        # the name is appended verbatim, without escaping
        return SwiftObject(
            uri=f"{self.container_uri}{row.name}",
            name=row.name,
            etag=row.etag,
            payload=PayloadInfo(content_length=row.size, content_type=row.content_type),
            last_modified=row.last_modified,
        )

    def __call__(self, raw_body: bytes | str, headers: Mapping[str, str]) -> ObjectList:
        try:
            rows = _ROWS.validate_json(raw_body)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Listing of container {self.container!r} is not an array of objects: {e}"
            ) from e
        return ObjectList(
            objects=tuple(self.to_object(row) for row in rows if isinstance(row, _ObjectRow)),
            container=parse_container_from_headers(self.container, headers),
            subdirs=tuple(row.subdir for row in rows if isinstance(row, _SubdirRow)),
        )


def reconstruct_object_list(
    raw_body: bytes | str,
    context: RequestContext,
    headers: Mapping[str, str],
) -> ObjectList:
    """Build an ObjectList from a listing body, its request and its headers.

    Raises:
        MissingContextError: If the context carries no container name
        MalformedResponseError: If the body is not a JSON array of object rows
    """
    return ObjectListReconstructor.for_request(context)(raw_body, headers)
