"""Zone-scoped transport pooling.

Each service API owns one ZoneTransports. Zone names are resolved against
the config on every lookup; only the underlying transports (and their HTTP
sessions) are pooled, one per endpoint URL, so they can be closed together.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import CloudConfig
from ..core.enums import ServiceType
from .rest import RESTTransport, RestRunner

logger = logging.getLogger(__name__)

TransportFactory = Callable[[CloudConfig, str], RESTTransport]


class ZoneTransports:
    """Resolves zones of one service to runners over pooled transports."""

    def __init__(
        self,
        config: CloudConfig,
        service: ServiceType,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._config = config
        self._service = service
        self._factory = transport_factory or RESTTransport.from_config
        self._pool: dict[str, RESTTransport] = {}

    @property
    def service(self) -> ServiceType:
        return self._service

    def configured_zones(self) -> set[str]:
        return self._config.configured_zones(self._service)

    def resolve(self, zone: str | None) -> tuple[str, RestRunner]:
        """Resolve a zone (None = default) to its name and a runner.

        Raises:
            ConfigurationError: If the zone is not configured for this service
        """
        zone_name, url = self._config.endpoint_for(self._service, zone)
        transport = self._pool.get(url)
        if transport is None:
            transport = self._factory(self._config, url)
            self._pool[url] = transport
            logger.debug(
                "transport_created",
                extra={"service": self._service.value, "zone": zone_name, "url": url},
            )
        return zone_name, RestRunner(transport)

    async def close(self) -> None:
        """Close every pooled transport."""
        pool, self._pool = self._pool, {}
        for transport in pool.values():
            await transport.close()
