"""High-level async client for definition lookups.

This wraps the chunk planner, a RestRunner and the definitions adapter:

- split any number of coordinates into capacity-bounded batches
- dispatch the batches concurrently (bounded by ``max_concurrency``)
- classify and decode each response, then merge the results

Notes:
- No retries, caching or rate limiting: the first failing batch raises and
  the remaining batches are cancelled.
- Result order is not request order; correlate through each definition's
  ``coordinates``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from time import perf_counter

from ..api import definitions
from ..config import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_ROOT,
    DEFAULT_TIMEOUT,
    MAX_COORDINATES_PER_REQUEST,
)
from ..core.coordinate import Coord
from ..models import GetResponse
from ..runtime.chunking import ChunkPlanner, ChunkPolicy
from ..runtime.chunking.telemetry import log_request_completed, log_request_error
from ..runtime.rest import HTTPClient, RestRunner


class DefinitionsClient:
    """Fetches definitions from a ClearlyDefined service."""

    def __init__(
        self,
        root: str = DEFAULT_ROOT,
        *,
        max_per_request: int = MAX_COORDINATES_PER_REQUEST,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: HTTPClient | None = None,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self.root = root
        self._planner = ChunkPlanner(
            ChunkPolicy(max_items=max_per_request), endpoint_id=definitions.SPEC.id
        )
        self._max_concurrency = max_concurrency
        self._owns_http = http_client is None
        self._http = http_client or HTTPClient(timeout=timeout)
        self._runner = RestRunner(self._http)
        self._adapter = definitions.Adapter()

    async def get_definitions(self, coordinates: Iterable[Coord]) -> GetResponse:
        """Fetch definitions for any number of coordinates.

        Args:
            coordinates: Any iterable of Coord values

        Returns:
            Merged GetResponse across all batch requests (empty for no input)

        Raises:
            HttpError: A request could not be sent
            HttpStatusError: The service answered a batch with a non-success status
            DeserializationError: A batch response could not be decoded
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)
        tasks = [
            asyncio.ensure_future(self._fetch_batch(index, chunk, semaphore))
            for index, chunk in enumerate(self._planner.iter_chunks(coordinates))
        ]
        if not tasks:
            return GetResponse()

        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return GetResponse.merge(results)

    async def _fetch_batch(
        self, index: int, chunk: list[str], semaphore: asyncio.Semaphore
    ) -> GetResponse:
        async with semaphore:
            start = perf_counter()
            try:
                result: GetResponse = await self._runner.run(
                    spec=definitions.SPEC,
                    adapter=self._adapter,
                    params={"coordinates": chunk},
                    root=self.root,
                )
            except Exception as e:
                log_request_error(
                    endpoint_id=definitions.SPEC.id,
                    chunk_index=index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

        log_request_completed(
            endpoint_id=definitions.SPEC.id,
            chunk_index=index,
            requested=len(chunk),
            definitions=len(result),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> DefinitionsClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
