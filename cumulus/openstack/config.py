"""Zone/region endpoint configuration.

Endpoints normally come from the identity service catalog. Authentication
is handled elsewhere, so the catalog slice this library needs (one base
URL per zone, per service) is supplied directly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.enums import ServiceType
from .core.exceptions import ConfigurationError

__version__ = "0.1.0"

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"cumulus-openstack/{__version__}"


class ServiceConfig(BaseModel):
    """Endpoints of one service, keyed by zone (or region) name."""

    endpoints: dict[str, str] = Field(default_factory=dict)
    default_zone: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("endpoints")
    @classmethod
    def strip_trailing_slash(cls, v: dict[str, str]) -> dict[str, str]:
        """Normalize endpoints so paths can be appended verbatim."""
        return {zone: url.rstrip("/") for zone, url in v.items()}


class CloudConfig(BaseModel):
    """Per-service endpoint catalog plus transport settings."""

    services: dict[ServiceType, ServiceConfig] = Field(default_factory=dict)
    auth_token: str | None = None
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> CloudConfig:
        """Build a config from plain data (e.g. a parsed settings file).

        Raises:
            ConfigurationError: If the data does not describe a valid config
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid cloud configuration: {e}") from e

    def configured_zones(self, service: ServiceType) -> set[str]:
        """Zone names configured for a service."""
        svc = self.services.get(service)
        return set(svc.endpoints) if svc else set()

    def endpoint_for(self, service: ServiceType, zone: str | None = None) -> tuple[str, str]:
        """Resolve a zone to its endpoint.

        When zone is None the service's default zone is used, or the only
        configured zone if there is exactly one.

        Returns:
            (zone name, base URL)

        Raises:
            ConfigurationError: If the service or zone is not configured
        """
        svc = self.services.get(service)
        if svc is None or not svc.endpoints:
            raise ConfigurationError(f"No endpoints configured for service '{service.value}'")

        if zone is None:
            if svc.default_zone is not None:
                zone = svc.default_zone
            elif len(svc.endpoints) == 1:
                zone = next(iter(svc.endpoints))
            else:
                raise ConfigurationError(
                    f"Zone required for service '{service.value}': "
                    f"configured zones are {sorted(svc.endpoints)}"
                )

        url = svc.endpoints.get(zone)
        if url is None:
            raise ConfigurationError(
                f"Zone '{zone}' not configured for service '{service.value}': "
                f"configured zones are {sorted(svc.endpoints)}"
            )
        return zone, url
