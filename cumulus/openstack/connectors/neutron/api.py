"""Neutron (networking) API.

NeutronApi hands out zone-scoped PortApi/RouterApi clients and exposes
zone-aware paged listings built on the pagination engine.
"""

from __future__ import annotations

from typing import Any

from cumulus.openstack.config import CloudConfig
from cumulus.openstack.core import ResourceKind, ServiceType
from cumulus.openstack.models import Port, ReferenceWithName, Router
from cumulus.openstack.runtime.pagination import (
    Page,
    PagedIterable,
    PageFetcher,
    PaginationEngine,
    PaginationOptions,
)
from cumulus.openstack.runtime.rest import RestRunner
from cumulus.openstack.runtime.zones import TransportFactory, ZoneTransports

from .endpoints import ports, routers


class PortApi:
    """Port operations against one zone."""

    def __init__(self, runner: RestRunner, zone: str) -> None:
        self._runner = runner
        self.zone = zone

    async def list_page(self, options: PaginationOptions | None = None) -> Page[Port]:
        return await self._runner.run(
            spec=ports.LIST_SPEC,
            adapter=ports.ListAdapter(),
            params={"zone": self.zone, "options": options},
        )

    async def get(self, port_id: str) -> Port | None:
        """Port details, or None if it does not exist."""
        return await self._runner.run(
            spec=ports.GET_SPEC,
            adapter=ports.GetAdapter(),
            params={"zone": self.zone, "port_id": port_id},
        )


class RouterApi:
    """Router extension operations against one zone."""

    def __init__(self, runner: RestRunner, zone: str) -> None:
        self._runner = runner
        self.zone = zone

    async def list_page(self, options: PaginationOptions | None = None) -> Page[ReferenceWithName]:
        return await self._runner.run(
            spec=routers.LIST_SPEC,
            adapter=routers.ListAdapter(),
            params={"zone": self.zone, "options": options},
        )

    async def get(self, router_id: str) -> Router | None:
        """Router details, or None if it does not exist."""
        return await self._runner.run(
            spec=routers.GET_SPEC,
            adapter=routers.GetAdapter(),
            params={"zone": self.zone, "router_id": router_id},
        )


async def _fetch_ports(api: PortApi, options: PaginationOptions) -> Page[Port]:
    return await api.list_page(options)


async def _fetch_routers(api: RouterApi, options: PaginationOptions) -> Page[ReferenceWithName]:
    return await api.list_page(options)


PAGE_FETCHERS: dict[ResourceKind, PageFetcher] = {
    ResourceKind.PORTS: _fetch_ports,
    ResourceKind.ROUTERS: _fetch_routers,
}


class NeutronApi:
    """Entry point for the networking service across configured zones."""

    def __init__(
        self,
        config: CloudConfig,
        *,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._zones = ZoneTransports(config, ServiceType.NETWORK, transport_factory)
        self._engine = PaginationEngine(self._resolve, PAGE_FETCHERS)

    def configured_zones(self) -> set[str]:
        return self._zones.configured_zones()

    def port_api_for_zone(self, zone: str | None = None) -> PortApi:
        zone_name, runner = self._zones.resolve(zone)
        return PortApi(runner, zone_name)

    def router_api_for_zone(self, zone: str | None = None) -> RouterApi:
        zone_name, runner = self._zones.resolve(zone)
        return RouterApi(runner, zone_name)

    def list_ports(
        self, zone: str | None = None, options: PaginationOptions | None = None
    ) -> PagedIterable[Port]:
        """All ports in a zone, fetched page by page as iteration proceeds."""
        return self._engine.list(ResourceKind.PORTS, zone, options)

    def list_routers(
        self, zone: str | None = None, options: PaginationOptions | None = None
    ) -> PagedIterable[ReferenceWithName]:
        return self._engine.list(ResourceKind.ROUTERS, zone, options)

    def _resolve(self, zone: str | None, kind: ResourceKind) -> Any:
        if kind == ResourceKind.PORTS:
            return self.port_api_for_zone(zone)
        return self.router_api_for_zone(zone)

    async def close(self) -> None:
        await self._zones.close()

    async def __aenter__(self) -> NeutronApi:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
