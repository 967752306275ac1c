"""Transport-neutral HTTP request and response values.

Requests are plain data so callers can execute them with any HTTP stack
(aiohttp, httpx, requests...) or dispatch them concurrently.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HTTPRequest:
    """A fully built HTTP request.

    Attributes:
        method: HTTP method ("GET" | "POST")
        url: Absolute URL
        headers: Request headers
        body: Encoded request body
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HTTPResponse:
    """Status, headers and raw body of an HTTP response.

    Attributes:
        status: HTTP status code
        body: Raw response body
        headers: Response headers
    """

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the status is a 2xx success."""
        return 200 <= self.status < 300
