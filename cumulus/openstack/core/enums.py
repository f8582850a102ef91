"""Core enumerations shared by the runtime and the service connectors.

Key Types:
    - ServiceType: Catalog service a zone endpoint belongs to
    - ResourceKind: Tag used to select a page-fetch strategy
    - NotFoundPolicy: Explicit per-operation treatment of HTTP 404
"""

from enum import Enum
from typing import Any


class ServiceType(str, Enum):
    """Service catalog types understood by this library."""

    OBJECT_STORE = "object-store"
    NETWORK = "network"
    QUEUES = "queues"


class ResourceKind(str, Enum):
    """Listable resource kinds.

    The pagination engine maps each kind to the function that fetches one
    page of it, so adding a listable resource means adding a table entry.
    """

    PORTS = "ports"
    ROUTERS = "routers"
    OBJECTS = "objects"


class NotFoundPolicy(str, Enum):
    """What an operation returns when the service answers 404.

    PROPAGATE raises NotFoundError. The others replace the error with a
    benign value and are chosen per operation, never as a shared default.
    """

    PROPAGATE = "propagate"
    FALSE = "false"
    NONE = "none"
    EMPTY = "empty"

    def fallback(self) -> Any:
        """Value returned in place of a 404 for this policy."""
        if self == NotFoundPolicy.FALSE:
            return False
        if self == NotFoundPolicy.EMPTY:
            return {}
        return None
