"""Structured logging for chunking and request execution.

This module provides telemetry hooks emitting structured logs for
observability. Hooks only report; errors are always re-raised by callers.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_chunk_sealed(
    *,
    endpoint_id: str,
    chunk_index: int,
    size: int,
    max_items: int,
) -> None:
    """Log that a chunk was sealed and is ready to become a request.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk
        size: Number of items in the chunk
        max_items: Per-request item cap
    """
    logger.debug(
        "chunk_sealed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "size": size,
            "max_items": max_items,
        },
    )


def log_request_completed(
    *,
    endpoint_id: str,
    chunk_index: int,
    requested: int,
    definitions: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single batch request.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk
        requested: Number of coordinates sent in the request
        definitions: Number of definitions decoded from the response
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "request_completed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "requested": requested,
            "definitions": definitions,
            "latency_ms": latency_ms,
        },
    )


def log_request_error(
    *,
    endpoint_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a batch request error.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "HttpStatusError", "DeserializationError")
        error_message: Error message
    """
    logger.error(
        "request_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
