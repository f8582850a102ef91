"""Unit tests for the Neutron API with a mocked transport."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from cumulus.openstack.config import CloudConfig, ServiceConfig
from cumulus.openstack.connectors.neutron import NeutronApi
from cumulus.openstack.core import (
    ConfigurationError,
    MalformedResponseError,
    NotFoundError,
    ServiceType,
)
from cumulus.openstack.models import Port, ReferenceWithName
from cumulus.openstack.runtime.pagination import PaginationOptions
from cumulus.openstack.runtime.rest import RESTTransport, RestResponse

DFW = "https://dfw.networks.example.com/v2.0"
ORD = "https://ord.networks.example.com/v2.0"


def json_response(payload, status=200, url=DFW):
    return RestResponse(status=status, body=json.dumps(payload).encode(), url=url)


def ports_page(*ids, next_marker=None):
    links = []
    if next_marker is not None:
        links.append({"rel": "next", "href": f"{DFW}/ports?marker={next_marker}&limit=2"})
    return json_response(
        {
            "ports": [{"id": i, "name": f"port-{i}", "network_id": "net-1"} for i in ids],
            "ports_links": links,
        }
    )


def make_transport():
    transport = MagicMock(spec=RESTTransport)
    transport.request = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def transports():
    return {DFW: make_transport(), ORD: make_transport()}


@pytest.fixture
def api(transports):
    config = CloudConfig(
        services={ServiceType.NETWORK: ServiceConfig(endpoints={"DFW": DFW, "ORD": ORD})}
    )
    return NeutronApi(config, transport_factory=lambda config, url: transports[url])


class TestListPorts:
    """Test zone-aware paged port listings."""

    @pytest.mark.asyncio
    async def test_two_pages(self, api, transports):
        transport = transports[DFW]
        transport.request.side_effect = [ports_page("a", "b", next_marker="T1"), ports_page("c")]

        ports = await api.list_ports("DFW").to_list()

        assert [p.id for p in ports] == ["a", "b", "c"]
        assert all(isinstance(p, Port) for p in ports)
        assert {p.zone for p in ports} == {"DFW"}
        assert transport.request.call_count == 2
        first, second = transport.request.call_args_list
        assert first.args == ("GET", "/ports")
        assert first.kwargs["params"] == {}
        assert second.kwargs["params"] == {"marker": "T1"}

    @pytest.mark.asyncio
    async def test_initial_options(self, api, transports):
        transports[DFW].request.side_effect = [ports_page("b")]

        await api.list_ports("DFW", PaginationOptions(marker="a", limit=2)).to_list()

        assert transports[DFW].request.call_args.kwargs["params"] == {"marker": "a", "limit": 2}

    @pytest.mark.asyncio
    async def test_zone_selects_endpoint(self, api, transports):
        transports[ORD].request.side_effect = [ports_page("x")]

        ports = await api.list_ports("ORD").to_list()

        assert [p.zone for p in ports] == ["ORD"]
        transports[DFW].request.assert_not_called()

    def test_unknown_zone_fails_before_request(self, api, transports):
        with pytest.raises(ConfigurationError):
            api.list_ports("SYD")
        transports[DFW].request.assert_not_called()

    def test_zone_required_with_several_configured(self, api):
        with pytest.raises(ConfigurationError):
            api.list_ports()

    @pytest.mark.asyncio
    async def test_malformed_page(self, api, transports):
        transports[DFW].request.side_effect = [json_response({"networks": []})]

        with pytest.raises(MalformedResponseError):
            await api.list_ports("DFW").to_list()

    @pytest.mark.asyncio
    async def test_not_found_mid_pagination(self, api, transports):
        transports[DFW].request.side_effect = [
            ports_page("a", next_marker="T1"),
            NotFoundError("gone"),
        ]

        with pytest.raises(NotFoundError):
            await api.list_ports("DFW").to_list()


class TestListRouters:
    @pytest.mark.asyncio
    async def test_routers_as_references(self, api, transports):
        transports[DFW].request.side_effect = [
            json_response(
                {
                    "routers": [
                        {"id": "r1", "name": "edge", "tenant_id": "t", "status": "ACTIVE"},
                    ],
                    "routers_links": [
                        {"rel": "next", "href": f"{DFW}/routers?marker=r1"},
                    ],
                }
            ),
            json_response({"routers": []}),
        ]

        routers = await api.list_routers("DFW").to_list()

        assert routers == [ReferenceWithName(id="r1", name="edge", tenant_id="t", zone="DFW")]
        assert transports[DFW].request.call_args.kwargs["params"] == {"marker": "r1"}


class TestZoneApis:
    @pytest.mark.asyncio
    async def test_get_port(self, api, transports):
        transports[DFW].request.return_value = json_response(
            {"port": {"id": "p1", "mac_address": "fa:16:3e:00:00:01", "admin_state_up": True}}
        )

        port = await api.port_api_for_zone("DFW").get("p1")

        assert port.mac_address == "fa:16:3e:00:00:01"
        assert port.zone == "DFW"

    @pytest.mark.asyncio
    async def test_get_quotes_ids(self, api, transports):
        transports[DFW].request.return_value = json_response({"router": {"id": "a/b c"}})

        await api.router_api_for_zone("DFW").get("a/b c")

        assert transports[DFW].request.call_args.args == ("GET", "/routers/a%2Fb%20c")

    @pytest.mark.asyncio
    async def test_get_missing_port(self, api, transports):
        transports[DFW].request.side_effect = NotFoundError("no port")

        assert await api.port_api_for_zone("DFW").get("nope") is None

    @pytest.mark.asyncio
    async def test_get_missing_router(self, api, transports):
        transports[ORD].request.side_effect = NotFoundError("no router")

        assert await api.router_api_for_zone("ORD").get("nope") is None

    def test_configured_zones(self, api):
        assert api.configured_zones() == {"DFW", "ORD"}
