"""GetResponse model."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from .definition import Definition


class GetResponse(BaseModel):
    """Definitions returned for one or more batch requests.

    The wire format is an object keyed by coordinate string, so the order of
    ``definitions`` carries no meaning and does not follow request order.
    Correlate through each definition's own ``coordinates``.
    """

    definitions: list[Definition] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.definitions)

    def __iter__(self) -> Iterator[Definition]:  # type: ignore[override]
        return iter(self.definitions)

    def by_coordinate(self) -> dict[str, Definition]:
        """Index definitions by their canonical coordinate string."""
        return {str(d.coordinates): d for d in self.definitions}

    @classmethod
    def merge(cls, responses: Iterable[GetResponse]) -> GetResponse:
        """Combine the results of several batch requests."""
        definitions: list[Definition] = []
        for response in responses:
            definitions.extend(response.definitions)
        return cls(definitions=definitions)
