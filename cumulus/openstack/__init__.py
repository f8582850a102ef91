"""Cumulus OpenStack - async client bindings for Swift, Neutron and Marconi."""

from .config import CloudConfig, ServiceConfig, __version__
from .connectors.marconi import MarconiApi, QueueApi
from .connectors.neutron import NeutronApi, PortApi, RouterApi
from .connectors.swift import (
    ObjectApi,
    RequestContext,
    StaticLargeObjectApi,
    SwiftApi,
    build_manifest,
    expected_manifest_etag,
    reconstruct_object_list,
)
from .core import (
    CloudError,
    ConfigurationError,
    HttpResponseError,
    MalformedResponseError,
    ManifestIntegrityError,
    MissingContextError,
    NotFoundError,
    NotFoundPolicy,
    ResourceKind,
    ServiceType,
    TransportError,
)
from .models import (
    Container,
    Link,
    MessagesStats,
    ObjectList,
    PayloadInfo,
    Port,
    QueueStats,
    ReferenceWithName,
    Router,
    Segment,
    SwiftObject,
)
from .runtime.pagination import Page, PagedIterable, PaginationEngine, PaginationOptions

__all__ = [
    "__version__",
    # Config
    "CloudConfig",
    "ServiceConfig",
    # APIs
    "MarconiApi",
    "NeutronApi",
    "ObjectApi",
    "PortApi",
    "QueueApi",
    "RouterApi",
    "StaticLargeObjectApi",
    "SwiftApi",
    # Object storage helpers
    "RequestContext",
    "build_manifest",
    "expected_manifest_etag",
    "reconstruct_object_list",
    # Pagination
    "Page",
    "PagedIterable",
    "PaginationEngine",
    "PaginationOptions",
    # Models
    "Container",
    "Link",
    "MessagesStats",
    "ObjectList",
    "PayloadInfo",
    "Port",
    "QueueStats",
    "ReferenceWithName",
    "Router",
    "Segment",
    "SwiftObject",
    # Core
    "NotFoundPolicy",
    "ResourceKind",
    "ServiceType",
    # Exceptions
    "CloudError",
    "ConfigurationError",
    "HttpResponseError",
    "MalformedResponseError",
    "ManifestIntegrityError",
    "MissingContextError",
    "NotFoundError",
    "TransportError",
]
