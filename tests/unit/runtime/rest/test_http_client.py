"""Precise unit tests for HTTPClient.

Tests focus on session management, response capture and transport errors.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from clearly.defined.core import HttpError
from clearly.defined.runtime.rest import HTTPClient, HTTPRequest


def _mock_response(status: int, body: bytes, headers: dict[str, str] | None = None):
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.headers = headers or {}
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response


def _mock_session(**kwargs):
    mock_session = MagicMock()
    mock_session.closed = False
    mock_session.request = MagicMock(**kwargs)
    return mock_session


REQUEST = HTTPRequest(
    method="POST",
    url="https://api.clearlydefined.io/definitions",
    headers={"Content-Type": "application/json", "Accept": "application/json"},
    body=b'["crate/cratesio/-/syn/1.0.14"]',
)


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientSend:
    """Test HTTPClient.send()."""

    @pytest.mark.asyncio
    async def test_send_returns_status_and_body(self):
        """Test send() captures status, headers and raw body."""
        client = HTTPClient()
        client._session = _mock_session(
            return_value=_mock_response(200, b"{}", {"Content-Type": "application/json"})
        )

        response = await client.send(REQUEST)

        assert response.status == 200
        assert response.body == b"{}"
        assert response.headers == {"Content-Type": "application/json"}
        client._session.request.assert_called_once_with(
            "POST",
            "https://api.clearlydefined.io/definitions",
            data=b'["crate/cratesio/-/syn/1.0.14"]',
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    @pytest.mark.asyncio
    async def test_send_does_not_raise_on_error_status(self):
        """Test non-success statuses are returned for classification."""
        client = HTTPClient()
        client._session = _mock_session(return_value=_mock_response(500, b""))

        response = await client.send(REQUEST)

        assert response.status == 500
        assert not response.ok

    @pytest.mark.asyncio
    async def test_send_wraps_client_errors(self):
        """Test aiohttp errors surface as HttpError with the cause chained."""
        client = HTTPClient()
        cause = aiohttp.ClientConnectionError("connection refused")
        client._session = _mock_session(side_effect=cause)

        with pytest.raises(HttpError, match="connection refused") as exc_info:
            await client.send(REQUEST)

        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_send_wraps_timeouts(self):
        """Test timeouts surface as HttpError."""
        client = HTTPClient()
        client._session = _mock_session(side_effect=asyncio.TimeoutError())

        with pytest.raises(HttpError):
            await client.send(REQUEST)
