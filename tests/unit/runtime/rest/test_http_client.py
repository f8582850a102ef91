"""Unit tests for HTTPClient.

Tests focus on session management, status mapping and response hooks.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from cumulus.openstack.core import (
    HttpResponseError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
)
from cumulus.openstack.runtime.rest import HTTPClient, RestResponse


def mock_response(status=200, body=b"{}", headers=None, url="https://api.example.com/test"):
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    response.url = url
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def client_with(*responses, base_url=None):
    client = HTTPClient(base_url=base_url)
    session = MagicMock()
    session.closed = False
    session.request = MagicMock(side_effect=list(responses))
    client._session = session
    return client, session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client._response_hooks == []

    def test_base_url_trailing_slash_stripped(self):
        client = HTTPClient(base_url="https://api.example.com/v1/")
        assert client.base_url == "https://api.example.com/v1"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequest:
    """Test request execution and status mapping."""

    @pytest.mark.asyncio
    async def test_returns_fully_read_response(self):
        client, _ = client_with(
            mock_response(
                status=200,
                body=b'[{"name": "a"}]',
                headers={"ETag": "abc"},
                url="https://api.example.com/c?format=json",
            )
        )

        result = await client.request("GET", "https://api.example.com/c", params={"format": "json"})

        assert result == RestResponse(
            status=200,
            headers={"ETag": "abc"},
            body=b'[{"name": "a"}]',
            url="https://api.example.com/c?format=json",
        )
        assert result.json() == [{"name": "a"}]

    @pytest.mark.asyncio
    async def test_relative_url_joined_with_base(self):
        client, session = client_with(mock_response(), base_url="https://api.example.com/v1")

        await client.request("GET", "/ports")

        args, _ = session.request.call_args
        assert args == ("GET", "https://api.example.com/v1/ports")

    @pytest.mark.asyncio
    async def test_absolute_url_kept(self):
        client, session = client_with(mock_response(), base_url="https://api.example.com")

        await client.request("GET", "https://other.com/test")

        assert "api.example.com" not in str(session.request.call_args)

    @pytest.mark.asyncio
    async def test_404_raises_not_found(self):
        client, _ = client_with(mock_response(status=404))

        with pytest.raises(NotFoundError) as exc_info:
            await client.request("DELETE", "https://api.example.com/test")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client, _ = client_with(mock_response(status=503))

        with pytest.raises(HttpResponseError) as exc_info:
            await client.request("GET", "https://api.example.com/test")

        assert exc_info.value.status_code == 503
        assert not isinstance(exc_info.value, NotFoundError)

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self):
        client = HTTPClient()
        session = MagicMock()
        session.closed = False
        session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            await client.request("GET", "https://api.example.com/test")

        assert exc_info.value.url == "https://api.example.com/test"
        assert session.request.call_count == 1

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        client = HTTPClient()
        session = MagicMock()
        session.closed = False
        session.request = MagicMock(side_effect=asyncio.TimeoutError())
        client._session = session

        with pytest.raises(TransportError):
            await client.request("GET", "https://api.example.com/test")


class TestHTTPClientResponseHooks:
    """Test HTTPClient response hooks."""

    @pytest.mark.asyncio
    async def test_hook_called_with_response(self):
        client, _ = client_with(mock_response(status=204, body=b""))
        hook = MagicMock(return_value=None)
        client.add_response_hook(hook)

        result = await client.request("PUT", "https://api.example.com/test")

        hook.assert_called_once_with(result)

    @pytest.mark.asyncio
    async def test_hook_runs_before_status_check(self):
        client, _ = client_with(mock_response(status=404))
        hook = MagicMock(return_value=None)
        client.add_response_hook(hook)

        with pytest.raises(NotFoundError):
            await client.request("GET", "https://api.example.com/test")

        hook.assert_called_once()

    @pytest.mark.asyncio
    async def test_async_hook(self):
        client, _ = client_with(mock_response())
        seen = []

        async def hook(response):
            seen.append(response.status)

        client.add_response_hook(hook)
        await client.request("GET", "https://api.example.com/test")

        assert seen == [200]

    @pytest.mark.asyncio
    async def test_hook_exception_does_not_break_request(self):
        client, _ = client_with(mock_response(body=b'{"ok": true}'))

        def failing_hook(response):
            raise Exception("Hook error")

        client.add_response_hook(failing_hook)

        result = await client.request("GET", "https://api.example.com/test")
        assert result.json() == {"ok": True}


class TestRestResponse:
    def test_header_case_insensitive(self):
        response = RestResponse(status=200, headers={"Etag": "x"})
        assert response.header("ETag") == "x"
        assert response.header("etag") == "x"
        assert response.header("Missing", "d") == "d"

    def test_invalid_json(self):
        response = RestResponse(status=200, body=b"<html>", url="https://x")
        with pytest.raises(MalformedResponseError):
            response.json()
