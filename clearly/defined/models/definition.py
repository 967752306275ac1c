"""Definition data models.

These models mirror the definition documents returned by the ClearlyDefined
service. Field names follow Python conventions with the camelCase wire names
as aliases. Unknown fields are ignored so that additions on the service side
do not break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.coordinate import Coordinate, format_coordinate, parse_version
from ..core.enums import Provider, Shape

_WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Coordinates(BaseModel):
    """Coordinates echoed back by the service inside a definition."""

    shape: str = Field(..., alias="type", description="Component type, e.g. crate")
    provider: str = Field(..., description="Provider, e.g. cratesio")
    namespace: str | None = Field(None, description="Namespace, absent when not applicable")
    name: str = Field(..., description="Component name")
    revision: str = Field(..., description="Version or commit id")
    curation_pr: int | None = Field(None, alias="pr", description="Applied curation PR")

    model_config = _WIRE_CONFIG

    @property
    def version(self) -> str:
        return self.revision

    def __str__(self) -> str:
        return format_coordinate(self)

    def to_coordinate(self) -> Coordinate:
        """Convert to a Coordinate value.

        Raises:
            ValueError: If the shape or provider is not a known enum member
        """
        return Coordinate(
            shape=Shape(self.shape),
            provider=Provider(self.provider),
            namespace=self.namespace,
            name=self.name,
            version=parse_version(self.revision),
            curation_pr=self.curation_pr,
        )


class Hashes(BaseModel):
    """Content hashes."""

    sha1: str | None = None
    sha256: str | None = None

    model_config = _WIRE_CONFIG


class DescribedScore(BaseModel):
    """Description quality score."""

    total: int = 0
    date: int = 0
    source: int = 0

    model_config = _WIRE_CONFIG


class Urls(BaseModel):
    """Registry, version and download URLs of a component."""

    registry: str | None = None
    version: str | None = None
    download: str | None = None

    model_config = _WIRE_CONFIG


class SourceLocation(BaseModel):
    """Location of the source a package was built from."""

    shape: str | None = Field(None, alias="type")
    provider: str | None = None
    namespace: str | None = None
    name: str | None = None
    revision: str | None = None
    url: str | None = None

    model_config = _WIRE_CONFIG


class Described(BaseModel):
    """Descriptive metadata harvested for a component."""

    release_date: str | None = Field(None, alias="releaseDate", description="Release date")
    project_website: str | None = Field(
        None, alias="projectWebsite", description="Project home page"
    )
    urls: Urls | None = None
    hashes: Hashes | None = None
    source_location: SourceLocation | None = Field(None, alias="sourceLocation")
    files: int = Field(0, description="Number of files in the component")
    tools: list[str] = Field(default_factory=list, description="Tools that harvested data")
    tool_score: DescribedScore | None = Field(None, alias="toolScore")
    score: DescribedScore | None = None

    model_config = _WIRE_CONFIG


class LicenseScore(BaseModel):
    """License clarity score breakdown."""

    total: int = 0
    declared: int = 0
    discovered: int = 0
    consistency: int = 0
    spdx: int = 0
    texts: int = 0

    model_config = _WIRE_CONFIG


class Attribution(BaseModel):
    """Attribution parties discovered in a facet."""

    unknown: int = Field(0, description="Files without attribution")
    parties: list[str] = Field(default_factory=list)

    model_config = _WIRE_CONFIG


class Discovered(BaseModel):
    """License expressions discovered in a facet."""

    unknown: int = Field(0, description="Files without a discovered license")
    expressions: list[str] = Field(default_factory=list)

    model_config = _WIRE_CONFIG


class FacetCore(BaseModel):
    """License analysis of a single facet."""

    attribution: Attribution = Field(default_factory=Attribution)
    discovered: Discovered = Field(default_factory=Discovered)
    files: int = 0

    model_config = _WIRE_CONFIG


class Facets(BaseModel):
    """License analysis per facet. Only the ``core`` facet is reported today."""

    core: FacetCore = Field(default_factory=FacetCore)

    model_config = _WIRE_CONFIG


class Licensed(BaseModel):
    """License analysis result of a component."""

    declared: str | None = Field(None, description="Declared SPDX license expression")
    facets: Facets = Field(default_factory=Facets)
    tool_score: LicenseScore | None = Field(None, alias="toolScore")
    score: LicenseScore | None = None

    model_config = _WIRE_CONFIG


class FileEntry(BaseModel):
    """Per-file metadata."""

    path: str
    hashes: Hashes | None = None
    license: str | None = None
    attributions: list[str] = Field(default_factory=list)
    natures: list[str] = Field(default_factory=list, description="e.g. license, notices")
    token: str | None = Field(None, description="Token of the stored license text")

    model_config = _WIRE_CONFIG


class Definition(BaseModel):
    """The service's full metadata record for one coordinate.

    ``described`` and ``licensed`` are absent when the component has not been
    harvested yet.
    """

    coordinates: Coordinates
    described: Described | None = None
    licensed: Licensed | None = None
    files: list[FileEntry] = Field(default_factory=list)

    model_config = _WIRE_CONFIG

    @property
    def is_harvested(self) -> bool:
        """Whether the service has processed this component."""
        return self.described is not None or self.licensed is not None
