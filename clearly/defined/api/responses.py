"""Response classification and reconciliation for definition lookups.

Architecture:
    Every response goes through a one-shot classifier:
    - 2xx: the body is reconciled into a GetResponse
    - otherwise: a structured API error is attempted (reserved extension
      point), then a status-only HttpStatusError is raised

    The reconciler decodes the keyed object ``{coordinate: definition}`` into
    an ordered mapping, then keeps only the values. Keys are redundant string
    encodings of each definition's ``coordinates`` and key order is not a
    correlation guarantee.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from ..core.exceptions import ApiError, DeserializationError, HttpStatusError
from ..models import Definition, GetResponse
from ..runtime.rest import HTTPResponse


def parse_definitions(body: bytes | str) -> GetResponse:
    """Decode a definitions response body.

    Top-level values that are not JSON objects, or objects without a
    ``coordinates`` field, are treated as unmodeled fields and skipped.

    Args:
        body: Raw response body

    Returns:
        GetResponse with one Definition per keyed entry

    Raises:
        DeserializationError: If the body is not a JSON object or an entry
            with coordinates is not a valid definition
    """
    try:
        payload: Any = json.loads(body)
    except (UnicodeDecodeError, ValueError) as e:
        raise DeserializationError(f"Invalid JSON in definitions response: {e}") from e

    if not isinstance(payload, dict):
        raise DeserializationError(
            f"Expected a JSON object in definitions response, got {type(payload).__name__}"
        )

    definitions: list[Definition] = []
    for key, value in payload.items():
        if not isinstance(value, dict) or "coordinates" not in value:
            continue
        try:
            definitions.append(Definition.model_validate(value))
        except ValidationError as e:
            raise DeserializationError(f"Invalid definition for {key!r}: {e}") from e

    return GetResponse(definitions=definitions)


def decode_api_error(response: HTTPResponse) -> ApiError | None:
    """Decode a structured API error from a non-success response.

    Reserved: the service has not been observed to return structured error
    bodies, so the body is never inspected and None is always returned.
    """
    return None


def classify_response(response: HTTPResponse) -> GetResponse:
    """Classify a definitions response and decode it on success.

    Raises:
        ApiError: Reserved, never raised today
        HttpStatusError: On any non-success status; the body is not parsed
        DeserializationError: On a success status with an unreadable body
    """
    if response.ok:
        return parse_definitions(response.body)

    api_error = decode_api_error(response)
    if api_error is not None:
        raise api_error
    raise HttpStatusError(response.status)
