"""Chunk planning logic for list-valued request bodies.

This module provides the ChunkPlanner class that splits a sequence of
coordinates into capacity-bounded chunks of canonical coordinate strings.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ...core.coordinate import Coord, format_coordinate
from .definitions import ChunkPolicy
from .telemetry import log_chunk_sealed


class ChunkPlanner:
    """Plans request chunks for an arbitrary number of coordinates.

    The planner walks its input exactly once, in order, and yields each chunk
    as soon as it is sealed. Only one chunk of pending strings is held at a
    time, so very large inputs never need to be materialized.
    """

    def __init__(self, policy: ChunkPolicy | None = None, *, endpoint_id: str = "unknown") -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy (default: 1000 items per chunk)
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._policy = policy or ChunkPolicy()
        self._endpoint_id = endpoint_id

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def iter_chunks(self, coordinates: Iterable[Coord]) -> Iterator[list[str]]:
        """Yield chunks of canonical coordinate strings.

        No chunk is empty, no chunk exceeds ``policy.max_items``, and the
        concatenation of all chunks reproduces the input order.

        Args:
            coordinates: Any iterable of Coord values (consumed once)

        Yields:
            Lists of coordinate strings, one per request
        """
        max_items = self._policy.max_items
        chunk: list[str] = []
        chunk_index = 0

        for coord in coordinates:
            chunk.append(format_coordinate(coord))
            if len(chunk) >= max_items:
                log_chunk_sealed(
                    endpoint_id=self._endpoint_id,
                    chunk_index=chunk_index,
                    size=len(chunk),
                    max_items=max_items,
                )
                yield chunk
                chunk = []
                chunk_index += 1

        if chunk:
            log_chunk_sealed(
                endpoint_id=self._endpoint_id,
                chunk_index=chunk_index,
                size=len(chunk),
                max_items=max_items,
            )
            yield chunk
