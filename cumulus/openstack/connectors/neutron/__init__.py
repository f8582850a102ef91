"""Neutron (networking) connector."""

from .api import NeutronApi, PortApi, RouterApi

__all__ = ["NeutronApi", "PortApi", "RouterApi"]
