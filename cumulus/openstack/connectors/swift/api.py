"""Swift (object storage) API.

SwiftApi hands out region- and container-scoped clients: ObjectApi for
listings and StaticLargeObjectApi for segmented objects.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from cumulus.openstack.config import CloudConfig
from cumulus.openstack.core import ManifestIntegrityError, ResourceKind, ServiceType
from cumulus.openstack.models import ObjectList, Segment, SwiftObject
from cumulus.openstack.runtime.pagination import (
    Page,
    PagedIterable,
    PageFetcher,
    PaginationEngine,
    PaginationOptions,
)
from cumulus.openstack.runtime.rest import NoneAdapter, RestRunner
from cumulus.openstack.runtime.zones import TransportFactory, ZoneTransports

from .endpoints import large_objects, objects
from .manifest import expected_manifest_etag

logger = logging.getLogger(__name__)


class ObjectApi:
    """Object operations in one container of one region."""

    def __init__(self, runner: RestRunner, region: str, container: str) -> None:
        self._runner = runner
        self.region = region
        self.container = container

    async def list(self, options: PaginationOptions | None = None) -> ObjectList:
        """One page of the container listing, with container metadata."""
        return await self._runner.run(
            spec=objects.LIST_SPEC,
            adapter=objects.ObjectListAdapter(),
            params={"container": self.container, "options": options},
        )

    def list_all(self, options: PaginationOptions | None = None) -> PagedIterable[SwiftObject]:
        """Every object in the container, fetched page by page.

        Swift carries no continuation token and its page size is a
        cluster setting, so the last name of every non-empty page becomes
        the next marker and the listing ends on the first empty page.
        """
        engine = PaginationEngine(lambda scope, kind: self, PAGE_FETCHERS)
        return engine.list(ResourceKind.OBJECTS, self.region, options)


async def _fetch_objects(api: ObjectApi, options: PaginationOptions) -> Page[SwiftObject]:
    listing = await api.list(options)
    return Page(items=listing.objects, next_token=listing.last_name())


PAGE_FETCHERS: dict[ResourceKind, PageFetcher] = {
    ResourceKind.OBJECTS: _fetch_objects,
}


class StaticLargeObjectApi:
    """Manifest operations for static large objects in one container.

    Lifecycle per name: absent -> published (replace_manifest) -> absent
    (delete). Publishing again replaces the whole manifest.
    """

    def __init__(self, runner: RestRunner, region: str, container: str) -> None:
        self._runner = runner
        self.region = region
        self.container = container

    async def replace_manifest(
        self,
        name: str,
        segments: Sequence[Segment],
        metadata: Mapping[str, str] | None = None,
        *,
        verify: bool = True,
    ) -> str:
        """Create or entirely replace the manifest stored under ``name``.

        Segments must already be uploaded; their order is kept as given.

        Args:
            name: Object name of the manifest
            segments: Ordered parts concatenated on download
            metadata: Object metadata, sent as ``X-Object-Meta-*`` headers
            verify: Compare the returned ETag with the MD5 of segment ETags

        Returns:
            ETag of the manifest object (MD5 of the concatenated segment ETags)

        Raises:
            ManifestIntegrityError: If verify is set and the ETags disagree
        """
        segments = list(segments)
        etag = await self._runner.run(
            spec=large_objects.REPLACE_SPEC,
            adapter=large_objects.ETagAdapter(),
            params={
                "container": self.container,
                "name": name,
                "segments": segments,
                "metadata": dict(metadata or {}),
            },
        )

        expected = expected_manifest_etag(segments)
        if verify and expected is not None and etag != expected:
            raise ManifestIntegrityError(
                f"Manifest {self.container}/{name} stored with ETag {etag}, expected {expected}",
                expected=expected,
                actual=etag,
            )

        logger.info(
            "manifest_replaced",
            extra={
                "container": self.container,
                "object_name": name,
                "segments": len(segments),
                "etag": etag,
            },
        )
        return etag

    async def delete(self, name: str) -> None:
        """Delete the manifest and all of its segments. No-op if absent."""
        await self._runner.run(
            spec=large_objects.DELETE_SPEC,
            adapter=NoneAdapter(),
            params={"container": self.container, "name": name},
        )


class SwiftApi:
    """Entry point for object storage across configured regions."""

    def __init__(
        self,
        config: CloudConfig,
        *,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._regions = ZoneTransports(config, ServiceType.OBJECT_STORE, transport_factory)

    def configured_regions(self) -> set[str]:
        return self._regions.configured_zones()

    def object_api_for_region_and_container(
        self, region: str | None, container: str
    ) -> ObjectApi:
        region_name, runner = self._regions.resolve(region)
        return ObjectApi(runner, region_name, container)

    def static_large_object_api_for_region_and_container(
        self, region: str | None, container: str
    ) -> StaticLargeObjectApi:
        region_name, runner = self._regions.resolve(region)
        return StaticLargeObjectApi(runner, region_name, container)

    async def close(self) -> None:
        await self._regions.close()

    async def __aenter__(self) -> SwiftApi:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
