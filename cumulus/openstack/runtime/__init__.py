"""Runtime components: REST execution, pagination and zone resolution."""

from .pagination import Page, PagedIterable, PageSource, PaginationEngine, PaginationOptions
from .rest import RESTTransport, RestEndpointSpec, RestRunner
from .zones import ZoneTransports

__all__ = [
    "Page",
    "PageSource",
    "PagedIterable",
    "PaginationEngine",
    "PaginationOptions",
    "RESTTransport",
    "RestEndpointSpec",
    "RestRunner",
    "ZoneTransports",
]
