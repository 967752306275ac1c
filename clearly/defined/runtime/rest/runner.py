"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import HttpError
from .http_client import HTTPClient
from .request import HTTPRequest, HTTPResponse


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Any:
        return response


def build_request(spec: RestEndpointSpec, root: str, params: dict[str, Any]) -> HTTPRequest:
    """Build an HTTPRequest for an endpoint spec.

    The body, if any, is serialized as compact UTF-8 JSON.

    Raises:
        HttpError: If the request cannot be constructed (e.g. a body that is
            not JSON serializable). This indicates a programming error.
    """
    url = f"{root.rstrip('/')}{spec.build_path(params)}"
    headers = spec.build_headers(params) if spec.build_headers else {}

    body = b""
    if spec.build_body is not None:
        try:
            body = json.dumps(
                spec.build_body(params), separators=(",", ":"), ensure_ascii=False
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise HttpError(f"Failed to build {spec.id} request body: {e}") from e

    return HTTPRequest(method=spec.method.upper(), url=url, headers=headers, body=body)


class RestRunner:
    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        root: str,
    ) -> Any:
        request = build_request(spec, root, params)
        response = await self._client.send(request)
        return adapter.parse(response, params)
