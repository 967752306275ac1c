"""HTTP client helper."""

from __future__ import annotations

import asyncio

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...core.exceptions import HttpError
from .request import HTTPRequest, HTTPResponse


class HTTPClient:
    """Async HTTP client wrapper that executes prebuilt requests.

    The client does not retry, throttle or cache: every request is sent once
    and transport failures surface as HttpError.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        """Send a request and read the whole response body.

        Non-success statuses are returned, not raised; classifying them is
        the caller's job.

        Raises:
            HttpError: On connection failures and timeouts
        """
        try:
            async with self.session.request(
                request.method,
                request.url,
                data=request.body or None,
                headers=dict(request.headers),
            ) as response:
                body = await response.read()
                return HTTPResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise HttpError(f"{request.method} {request.url} failed: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
