"""Core enums and exceptions."""

from .enums import NotFoundPolicy, ResourceKind, ServiceType
from .exceptions import (
    CloudError,
    ConfigurationError,
    HttpResponseError,
    MalformedResponseError,
    ManifestIntegrityError,
    MissingContextError,
    NotFoundError,
    TransportError,
)

__all__ = [
    "CloudError",
    "ConfigurationError",
    "HttpResponseError",
    "MalformedResponseError",
    "ManifestIntegrityError",
    "MissingContextError",
    "NotFoundError",
    "NotFoundPolicy",
    "ResourceKind",
    "ServiceType",
    "TransportError",
]
