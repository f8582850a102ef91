"""Custom exception hierarchy."""

from __future__ import annotations


class CloudError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(CloudError):
    """Network or transport-level failure.

    Raised when the request never produced an HTTP response (connection
    refused, DNS failure, timeout). Not retried by this library.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class HttpResponseError(CloudError):
    """Service answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class NotFoundError(HttpResponseError):
    """Target resource (or its enclosing scope) does not exist."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, status_code=404, url=url)


class MalformedResponseError(CloudError):
    """Response body did not match the expected shape."""

    pass


class MissingContextError(CloudError):
    """Request context lacks a value a response parser depends on.

    This indicates a mismatch between the caller and the parser bound to
    the operation, not a runtime condition of the remote service.
    """

    pass


class ConfigurationError(CloudError):
    """Unknown zone/region or unconfigured service."""

    pass


class ManifestIntegrityError(CloudError):
    """Server manifest ETag disagrees with the locally computed one."""

    def __init__(self, message: str, expected: str, actual: str | None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
