"""REST runtime abstractions."""

from .http_client import HTTPClient
from .request import HTTPRequest, HTTPResponse
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, build_request

__all__ = [
    "HTTPClient",
    "HTTPRequest",
    "HTTPResponse",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "build_request",
]
