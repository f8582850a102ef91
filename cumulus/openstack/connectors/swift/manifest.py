"""Static large object manifests.

A static large object is a manifest listing already-uploaded segments in
the order they are concatenated on download. The server answers a
manifest PUT with an ETag equal to the MD5 of the segments' ETags
concatenated in manifest order, which lets callers check the manifest was
accepted as sent without reading the assembled object back.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence

from cumulus.openstack.models import Segment


def build_manifest(segments: Sequence[Segment]) -> bytes:
    """Serialize segments to the manifest JSON body.

    Order is preserved exactly. An empty list is serialized as-is; whether
    it is acceptable is for the server to decide.
    """
    return json.dumps([segment.model_dump(exclude_none=True) for segment in segments]).encode(
        "utf-8"
    )


def normalize_etag(etag: str) -> str:
    return etag.strip().strip('"')


def expected_manifest_etag(segments: Sequence[Segment]) -> str | None:
    """MD5 hex digest of the concatenated segment ETags.

    Returns None when any segment has no ETag or carries a byte range,
    since the server-side value then cannot be predicted: ranged segments
    contribute a server-normalized range to the digest.
    """
    etags: list[str] = []
    for segment in segments:
        if segment.etag is None or segment.range is not None:
            return None
        etags.append(normalize_etag(segment.etag))
    return hashlib.md5("".join(etags).encode("utf-8")).hexdigest()
