"""Networking (Neutron) resource models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReferenceWithName(BaseModel):
    """Minimal listed resource: id, name, owning tenant.

    ``zone`` is not part of the service payload; it is injected from the
    zone the listing was issued against.
    """

    id: str = Field(..., min_length=1)
    name: str | None = None
    tenant_id: str | None = None
    zone: str | None = None

    model_config = ConfigDict(frozen=True)


class Port(ReferenceWithName):
    """Network port details."""

    network_id: str | None = None
    status: str | None = None
    admin_state_up: bool | None = None
    mac_address: str | None = None
    device_id: str | None = None
    device_owner: str | None = None
    fixed_ips: list[dict[str, Any]] = Field(default_factory=list)


class Router(ReferenceWithName):
    """Router details."""

    status: str | None = None
    admin_state_up: bool | None = None
    external_gateway_info: dict[str, Any] | None = None
