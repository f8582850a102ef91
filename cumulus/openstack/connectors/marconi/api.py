"""Marconi (message queuing) API."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from cumulus.openstack.config import CloudConfig
from cumulus.openstack.core import ServiceType
from cumulus.openstack.models import QueueStats
from cumulus.openstack.runtime.rest import RestEndpointSpec, RestRunner, TrueAdapter
from cumulus.openstack.runtime.zones import TransportFactory, ZoneTransports

from .endpoints import queues


class QueueApi:
    """Queue operations against one zone.

    Boolean operations return True on success and False when the queue
    (or its endpoint) answers 404.
    """

    def __init__(self, runner: RestRunner, zone: str, client_id: str) -> None:
        self._runner = runner
        self.zone = zone
        self.client_id = client_id

    async def _run_bool(self, spec: RestEndpointSpec, **params: Any) -> bool:
        return await self._runner.run(
            spec=spec,
            adapter=TrueAdapter(),
            params={"client_id": self.client_id, **params},
        )

    async def create(self, name: str) -> bool:
        return await self._run_bool(queues.CREATE_SPEC, name=name)

    async def delete(self, name: str) -> bool:
        return await self._run_bool(queues.DELETE_SPEC, name=name)

    async def exists(self, name: str) -> bool:
        return await self._run_bool(queues.EXISTS_SPEC, name=name)

    async def set_metadata(self, name: str, metadata: Mapping[str, str]) -> bool:
        """Replace the queue's metadata document."""
        return await self._run_bool(queues.SET_METADATA_SPEC, name=name, metadata=metadata)

    async def get_metadata(self, name: str) -> dict[str, Any]:
        """Queue metadata; empty if the queue does not exist."""
        return await self._runner.run(
            spec=queues.GET_METADATA_SPEC,
            adapter=queues.MetadataAdapter(),
            params={"client_id": self.client_id, "name": name},
        )

    async def get_stats(self, name: str) -> QueueStats | None:
        """Message statistics; None if the queue does not exist."""
        return await self._runner.run(
            spec=queues.GET_STATS_SPEC,
            adapter=queues.StatsAdapter(),
            params={"client_id": self.client_id, "name": name},
        )


class MarconiApi:
    """Entry point for the queuing service across configured zones."""

    def __init__(
        self,
        config: CloudConfig,
        *,
        client_id: str | None = None,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._zones = ZoneTransports(config, ServiceType.QUEUES, transport_factory)
        self.client_id = client_id or str(uuid.uuid4())

    def configured_zones(self) -> set[str]:
        return self._zones.configured_zones()

    def queue_api_for_zone(self, zone: str | None = None) -> QueueApi:
        zone_name, runner = self._zones.resolve(zone)
        return QueueApi(runner, zone_name, self.client_id)

    async def close(self) -> None:
        await self._zones.close()

    async def __aenter__(self) -> MarconiApi:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
