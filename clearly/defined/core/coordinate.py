"""Component coordinates and their canonical string form.

Coordinates identify a specific component, for example
``crate/cratesio/-/syn/1.0.14`` in
``https://clearlydefined.io/definitions/crate/cratesio/-/syn/1.0.14``.

Architecture:
    - Coord: Protocol describing anything that can be addressed as a coordinate
    - Coordinate: Default frozen value type satisfying the protocol
    - format_coordinate(): The single formatter shared by every Coord
    - parse_coordinate(): Inverse of format_coordinate() for canonical strings

Coordinate Format:
    {shape}/{provider}/{namespace}/{name}/{revision}[/pr/{number}]

    shape     - ecosystem of the component (npm, git, nuget, maven, crate...)
    provider  - where the component can be found (npmjs, github, cratesio...)
    namespace - GitHub org, npm scope, Maven group id... ``-`` when absent
    name      - simple component name within the namespace
    revision  - version or commit id
    pr        - marker segment selecting the result of applying a curation PR
                to the harvested and curated data, followed by the PR number

Design Decisions:
    - Protocol over inheritance: Callers can pass their own package models
      (lockfile entries, SBOM rows...) without wrapping them
    - No validation: Field combinations are trusted; the service rejects
      coordinates it does not understand
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

import semver

from .enums import Provider, Shape

# Either a parsed semantic version or an opaque revision (commit sha, tag...)
CoordVersion = Union[semver.Version, str]

NO_NAMESPACE = "-"
_PR_MARKER = "pr"


@runtime_checkable
class Coord(Protocol):
    """Protocol for values addressable as a ClearlyDefined coordinate.

    ``namespace`` and ``curation_pr`` are optional: implementations that do
    not define them are formatted as if they were ``None``.
    """

    @property
    def shape(self) -> Shape: ...

    @property
    def provider(self) -> Provider: ...

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> CoordVersion: ...


@dataclass(frozen=True)
class Coordinate:
    """Coordinates of a specific component.

    Attributes:
        shape: Packaging ecosystem of the component
        provider: Registry or host the component is fetched from
        name: Component name
        version: Parsed semantic version or opaque revision string
        namespace: Optional namespace, rendered as ``-`` when absent
        curation_pr: Optional curation PR number to overlay on the definition
    """

    shape: Shape
    provider: Provider
    name: str
    version: CoordVersion
    namespace: str | None = None
    curation_pr: int | None = None

    def __str__(self) -> str:
        return format_coordinate(self)


def format_version(version: CoordVersion) -> str:
    """Render a coordinate revision."""
    if isinstance(version, semver.Version):
        return str(version)
    return version


def format_coordinate(coord: Coord) -> str:
    """Render any Coord in canonical ``shape/provider/namespace/name/revision`` form.

    Args:
        coord: Value satisfying the Coord protocol

    Returns:
        Canonical coordinate string, with ``/pr/{number}`` appended when the
        coordinate carries a curation PR
    """
    namespace = getattr(coord, "namespace", None)
    out = "/".join(
        (
            _component_str(coord.shape),
            _component_str(coord.provider),
            namespace if namespace is not None else NO_NAMESPACE,
            coord.name,
            format_version(coord.version),
        )
    )

    curation_pr = getattr(coord, "curation_pr", None)
    if curation_pr is not None:
        out = f"{out}/{_PR_MARKER}/{curation_pr}"
    return out


def parse_version(revision: str) -> CoordVersion:
    """Parse a revision as a semantic version, keeping it opaque otherwise."""
    if semver.Version.is_valid(revision):
        return semver.Version.parse(revision)
    return revision


def parse_coordinate(text: str) -> Coordinate:
    """Parse a canonical coordinate string.

    Args:
        text: Coordinate string, e.g. ``crate/cratesio/-/syn/1.0.14``

    Returns:
        Coordinate with ``-`` namespace mapped to None

    Raises:
        ValueError: If the string does not have the canonical shape or names
            an unknown shape/provider
    """
    parts = text.strip().strip("/").split("/")
    curation_pr: int | None = None

    if len(parts) == 7:
        if parts[5] != _PR_MARKER:
            raise ValueError(f"Invalid coordinate: {text!r} (expected '/pr/<number>' suffix)")
        try:
            curation_pr = int(parts[6])
        except ValueError as e:
            raise ValueError(f"Invalid curation PR number in coordinate: {text!r}") from e
        parts = parts[:5]

    if len(parts) != 5 or not all(parts):
        raise ValueError(
            f"Invalid coordinate: {text!r} (expected shape/provider/namespace/name/revision)"
        )

    shape_str, provider_str, namespace, name, revision = parts
    shape = Shape.from_str(shape_str)
    if shape is None:
        raise ValueError(f"Unknown coordinate shape: {shape_str!r}")
    provider = Provider.from_str(provider_str)
    if provider is None:
        raise ValueError(f"Unknown coordinate provider: {provider_str!r}")

    return Coordinate(
        shape=shape,
        provider=provider,
        namespace=None if namespace == NO_NAMESPACE else namespace,
        name=name,
        version=parse_version(revision),
        curation_pr=curation_pr,
    )


def _component_str(value: Shape | Provider | str) -> str:
    if isinstance(value, (Shape, Provider)):
        return value.as_str()
    return value
