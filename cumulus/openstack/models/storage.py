"""Object storage (Swift) models."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PayloadInfo(BaseModel):
    """Content metadata of an object whose bytes were not fetched.

    Listings report length and type only, so this stands in for the
    payload of a listed object.
    """

    content_length: int = Field(..., ge=0)
    content_type: str | None = None

    model_config = ConfigDict(frozen=True)


class SwiftObject(BaseModel):
    """Object as reported by a container listing."""

    uri: str
    name: str
    etag: str
    payload: PayloadInfo
    last_modified: datetime

    model_config = ConfigDict(frozen=True)


class Container(BaseModel):
    """Container metadata, parsed from response headers."""

    name: str = Field(..., min_length=1)
    object_count: int | None = None
    bytes_used: int | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ObjectList(BaseModel):
    """One page of a container listing plus the container it came from.

    ``subdirs`` holds the pseudo-directories Swift reports in place of
    objects when the listing is made with a ``delimiter``.
    """

    objects: tuple[SwiftObject, ...] = ()
    container: Container
    subdirs: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.objects)

    def names(self) -> list[str]:
        return [o.name for o in self.objects]

    def iter_objects(self) -> Iterator[SwiftObject]:
        return iter(self.objects)

    def last_name(self) -> str | None:
        """Greatest name on the page, object or pseudo-directory."""
        names = [o.name for o in self.objects[-1:]] + list(self.subdirs[-1:])
        return max(names) if names else None


class Segment(BaseModel):
    """One part of a static large object manifest.

    Field names match the manifest wire format. ``etag`` and ``range`` are
    optional; the server fills in or checks what is present.
    """

    path: str = Field(..., min_length=1)
    etag: str | None = None
    size_bytes: int | None = Field(None, ge=0)
    range: str | None = None

    model_config = ConfigDict(frozen=True)
