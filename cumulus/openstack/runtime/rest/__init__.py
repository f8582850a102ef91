"""REST runtime abstractions."""

from .http_client import HTTPClient, RestResponse
from .runner import NoneAdapter, ResponseAdapter, RestEndpointSpec, RestRunner, TrueAdapter
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "NoneAdapter",
    "RESTTransport",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestResponse",
    "RestRunner",
    "TrueAdapter",
]
