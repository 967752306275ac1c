"""Closed enumerations for coordinate components.

Architecture:
    ClearlyDefined identifies a component by shape (the packaging ecosystem,
    called ``type`` on the wire) and provider (the registry or host the
    component is fetched from). Both are closed tables on the service side,
    so they are modeled as string enums whose values are the wire spelling.

Design Decisions:
    - String enums: Values serialize directly into coordinate strings
    - ``as_str()``: Explicit accessor for formatting code paths
"""

from enum import Enum
from typing import Optional


class Shape(str, Enum):
    """The "type" of a component, i.e. its packaging ecosystem."""

    COMPOSER = "composer"
    CONDA = "conda"
    CONDASRC = "condasrc"
    # A Rust crate
    CRATE = "crate"
    DEB = "deb"
    DEBSRC = "debsrc"
    GEM = "gem"
    GIT = "git"
    GO = "go"
    MAVEN = "maven"
    NPM = "npm"
    NUGET = "nuget"
    POD = "pod"
    PYPI = "pypi"
    SOURCE_ARCHIVE = "sourcearchive"

    def as_str(self) -> str:
        """Wire spelling of this shape."""
        return self.value

    @classmethod
    def from_str(cls, value: str) -> Optional["Shape"]:
        """Get shape from its wire spelling. Returns None if no match."""
        try:
            return cls(value)
        except ValueError:
            return None


class Provider(str, Enum):
    """Where a component can be found (registry, forge or archive host)."""

    ANACONDA_MAIN = "anaconda-main"
    ANACONDA_R = "anaconda-r"
    COCOAPODS = "cocoapods"
    CONDA_FORGE = "conda-forge"
    # The canonical crates.io registry for Rust crates
    CRATESIO = "cratesio"
    DEBIAN = "debian"
    GITHUB = "github"
    GITLAB = "gitlab"
    GOLANG = "golang"
    GRADLE_PLUGIN = "gradleplugin"
    MAVEN_CENTRAL = "mavencentral"
    MAVEN_GOOGLE = "mavengoogle"
    NPMJS = "npmjs"
    NUGET = "nuget"
    PACKAGIST = "packagist"
    PYPI = "pypi"
    RUBYGEMS = "rubygems"

    def as_str(self) -> str:
        """Wire spelling of this provider."""
        return self.value

    @classmethod
    def from_str(cls, value: str) -> Optional["Provider"]:
        """Get provider from its wire spelling. Returns None if no match."""
        try:
            return cls(value)
        except ValueError:
            return None
