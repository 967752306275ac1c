"""Chunking policy structures.

This module defines the data structure used to describe how a collection of
coordinates is split across requests.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...config import MAX_COORDINATES_PER_REQUEST


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for an endpoint that accepts a list of items.

    Attributes:
        max_items: Maximum number of items per request (e.g., 1000 coordinates)
    """

    max_items: int = MAX_COORDINATES_PER_REQUEST

    def __post_init__(self) -> None:
        """Validate chunk policy configuration."""
        if self.max_items < 1:
            raise ValueError(f"ChunkPolicy max_items must be >= 1, got {self.max_items}")
