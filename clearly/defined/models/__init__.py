"""Data models for ClearlyDefined definitions.

Architecture:
    This module exports the Pydantic v2 models used to decode the service's
    definition documents. All models are immutable (frozen=True) and ignore
    unknown fields so that service-side additions do not break decoding.

Model Categories:
    - Identity: Coordinates
    - Description: Described, Urls, Hashes, SourceLocation, DescribedScore
    - Licensing: Licensed, Facets, FacetCore, Attribution, Discovered, LicenseScore
    - Files: FileEntry
    - Results: Definition, GetResponse

See Also:
    - Pydantic documentation: https://docs.pydantic.dev/
    - ClearlyDefined API: https://api.clearlydefined.io/api-docs/
"""

from .definition import (
    Attribution,
    Coordinates,
    Definition,
    Described,
    DescribedScore,
    Discovered,
    FacetCore,
    Facets,
    FileEntry,
    Hashes,
    Licensed,
    LicenseScore,
    SourceLocation,
    Urls,
)
from .response import GetResponse

__all__ = [
    "Attribution",
    "Coordinates",
    "Definition",
    "Described",
    "DescribedScore",
    "Discovered",
    "FacetCore",
    "Facets",
    "FileEntry",
    "GetResponse",
    "Hashes",
    "Licensed",
    "LicenseScore",
    "SourceLocation",
    "Urls",
]
