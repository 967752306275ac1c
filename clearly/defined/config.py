"""Shared ClearlyDefined service constants.

This module centralizes the service roots and per-request limits used by
the request builders and the HTTP client.
"""

from __future__ import annotations

# Public service roots
# - Production: api.clearlydefined.io
# - Development: dev-api.clearlydefined.io (harvests and curations are not final)
DEFAULT_ROOT = "https://api.clearlydefined.io"
DEV_ROOT = "https://dev-api.clearlydefined.io"

# POST /definitions accepts at most this many coordinates per body
MAX_COORDINATES_PER_REQUEST = 1000

# Total timeout (seconds) for a single request
DEFAULT_TIMEOUT = 30.0

# Concurrent batch requests issued by DefinitionsClient
DEFAULT_MAX_CONCURRENCY = 4

JSON_CONTENT_TYPE = "application/json"
