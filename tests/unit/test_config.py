"""Unit tests for endpoint configuration."""

from __future__ import annotations

import pytest

from cumulus.openstack.config import CloudConfig, ServiceConfig
from cumulus.openstack.core import ConfigurationError, ServiceType


@pytest.fixture
def config():
    return CloudConfig(
        services={
            ServiceType.NETWORK: ServiceConfig(
                endpoints={"DFW": "https://dfw.example.com/v2.0/", "ORD": "https://ord.example.com/v2.0"},
                default_zone="ORD",
            ),
            ServiceType.QUEUES: ServiceConfig(endpoints={"IAD": "https://iad.example.com/v1/1"}),
        }
    )


class TestEndpointFor:
    def test_explicit_zone(self, config):
        assert config.endpoint_for(ServiceType.NETWORK, "DFW") == (
            "DFW",
            "https://dfw.example.com/v2.0",
        )

    def test_default_zone(self, config):
        assert config.endpoint_for(ServiceType.NETWORK) == ("ORD", "https://ord.example.com/v2.0")

    def test_single_zone_is_default(self, config):
        assert config.endpoint_for(ServiceType.QUEUES)[0] == "IAD"

    def test_unknown_zone(self, config):
        with pytest.raises(ConfigurationError, match="SYD"):
            config.endpoint_for(ServiceType.NETWORK, "SYD")

    def test_unconfigured_service(self, config):
        with pytest.raises(ConfigurationError):
            config.endpoint_for(ServiceType.OBJECT_STORE)

    def test_ambiguous_without_default(self):
        config = CloudConfig(
            services={
                ServiceType.NETWORK: ServiceConfig(
                    endpoints={"DFW": "https://dfw", "ORD": "https://ord"}
                )
            }
        )
        with pytest.raises(ConfigurationError, match="Zone required"):
            config.endpoint_for(ServiceType.NETWORK)

    def test_configured_zones(self, config):
        assert config.configured_zones(ServiceType.NETWORK) == {"DFW", "ORD"}
        assert config.configured_zones(ServiceType.OBJECT_STORE) == set()


class TestFromMapping:
    def test_plain_data(self):
        config = CloudConfig.from_mapping(
            {
                "services": {"object-store": {"endpoints": {"DFW": "https://s/v1/a"}}},
                "auth_token": "tok",
                "timeout": 10,
            }
        )

        assert config.endpoint_for(ServiceType.OBJECT_STORE) == ("DFW", "https://s/v1/a")
        assert config.auth_token == "tok"
        assert config.timeout == 10.0

    def test_invalid(self):
        with pytest.raises(ConfigurationError):
            CloudConfig.from_mapping({"services": {"compute": {}}})

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError):
            CloudConfig.from_mapping({"timeout": 0})
