"""ClearlyDefined definitions endpoint.

``POST /definitions`` takes a JSON array of coordinate strings, at most 1000
per request, and answers with an object keyed by coordinate string.

See https://api.clearlydefined.io/api-docs/#/definitions/post_definitions
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ..config import DEFAULT_ROOT, JSON_CONTENT_TYPE, MAX_COORDINATES_PER_REQUEST
from ..core.coordinate import Coord
from ..models import GetResponse
from ..runtime.chunking import ChunkPlanner, ChunkPolicy
from ..runtime.rest import (
    HTTPRequest,
    HTTPResponse,
    ResponseAdapter,
    RestEndpointSpec,
    build_request,
)
from .responses import classify_response

# Endpoint specification
SPEC = RestEndpointSpec(
    id="definitions",
    method="POST",
    build_path=lambda _: "/definitions",
    build_body=lambda params: params["coordinates"],
    build_headers=lambda _: {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
    },
)


class Adapter(ResponseAdapter):
    """Adapter for classifying and parsing a definitions response."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> GetResponse:
        return classify_response(response)


def build_chunk_request(chunk: list[str], *, root: str = DEFAULT_ROOT) -> HTTPRequest:
    """Build the request for one chunk of coordinate strings."""
    return build_request(SPEC, root, {"coordinates": chunk})


def get(
    coordinates: Iterable[Coord],
    *,
    root: str = DEFAULT_ROOT,
    max_per_request: int = MAX_COORDINATES_PER_REQUEST,
) -> Iterator[HTTPRequest]:
    """Build the requests needed to fetch definitions for ``coordinates``.

    The endpoint is limited to ``max_per_request`` coordinates per request,
    which is why this returns an iterator of requests. Requests are produced
    lazily, one sealed chunk at a time, in input order.

    Args:
        coordinates: Any iterable of Coord values (consumed once)
        root: Service root URL
        max_per_request: Per-request coordinate cap

    Returns:
        Iterator yielding ``ceil(len(coordinates) / max_per_request)`` requests

    Raises:
        ValueError: If ``max_per_request`` is less than 1
    """
    planner = ChunkPlanner(ChunkPolicy(max_items=max_per_request), endpoint_id=SPEC.id)
    return (build_chunk_request(chunk, root=root) for chunk in planner.iter_chunks(coordinates))
