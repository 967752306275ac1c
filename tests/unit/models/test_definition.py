"""Unit tests for definition models."""

from __future__ import annotations

import pytest
import semver
from pydantic import ValidationError

from clearly.defined.core import Provider, Shape
from clearly.defined.models import Coordinates, Definition

SYN_DEFINITION = {
    "coordinates": {
        "type": "crate",
        "provider": "cratesio",
        "name": "syn",
        "revision": "1.0.14",
    },
    "described": {
        "releaseDate": "2020-01-20",
        "projectWebsite": "https://github.com/dtolnay/syn",
        "urls": {
            "registry": "https://crates.io/crates/syn",
            "version": "https://crates.io/crates/syn/1.0.14",
            "download": "https://crates.io/api/v1/crates/syn/1.0.14/download",
        },
        "hashes": {"sha1": "af6f3550d8dff9ef7dc34d384ac6f107e5d31c8a", "sha256": "abc"},
        "files": 43,
        "tools": ["clearlydefined/1.3.1", "licensee/9.13.0", "scancode/3.2.2"],
        "toolScore": {"total": 100, "date": 30, "source": 70},
        "sourceLocation": {
            "type": "git",
            "provider": "github",
            "namespace": "dtolnay",
            "name": "syn",
            "revision": "5f3c5a2",
            "url": "https://github.com/dtolnay/syn/tree/5f3c5a2",
        },
        "score": {"total": 100, "date": 30, "source": 70},
    },
    "licensed": {
        "declared": "Apache-2.0 OR MIT",
        "toolScore": {
            "total": 60,
            "declared": 30,
            "discovered": 0,
            "consistency": 15,
            "spdx": 15,
            "texts": 0,
        },
        "facets": {
            "core": {
                "attribution": {"unknown": 41, "parties": ["Copyright (c) David Tolnay"]},
                "discovered": {"unknown": 41, "expressions": ["Apache-2.0", "MIT"]},
                "files": 43,
            }
        },
        "score": {
            "total": 60,
            "declared": 30,
            "discovered": 0,
            "consistency": 15,
            "spdx": 15,
            "texts": 0,
        },
    },
    "files": [
        {
            "path": "LICENSE-MIT",
            "license": "MIT",
            "natures": ["license"],
            "hashes": {"sha1": "1", "sha256": "2"},
            "token": "d2a3f1",
        },
        {"path": "src/lib.rs", "attributions": ["Copyright (c) David Tolnay"]},
    ],
    "_meta": {"schemaVersion": "1.6.1", "updated": "2020-02-01T00:00:00.000Z"},
}


class TestDefinition:
    """Test decoding of full and partial definitions."""

    def test_full_definition(self):
        """Test a fully harvested definition decodes every section."""
        definition = Definition.model_validate(SYN_DEFINITION)

        assert definition.is_harvested
        assert definition.described is not None
        assert definition.described.release_date == "2020-01-20"
        assert definition.described.urls.registry == "https://crates.io/crates/syn"
        assert definition.described.tool_score.total == 100
        assert definition.described.source_location.shape == "git"
        assert definition.described.files == 43

        assert definition.licensed is not None
        assert definition.licensed.declared == "Apache-2.0 OR MIT"
        assert definition.licensed.score.consistency == 15
        core = definition.licensed.facets.core
        assert core.discovered.expressions == ["Apache-2.0", "MIT"]
        assert core.attribution.parties == ["Copyright (c) David Tolnay"]

        assert len(definition.files) == 2
        assert definition.files[0].natures == ["license"]
        assert definition.files[0].token == "d2a3f1"
        assert definition.files[1].license is None
        assert definition.files[1].natures == []

    def test_unharvested_definition(self):
        """Test described/licensed absent and files empty when omitted."""
        definition = Definition.model_validate(
            {
                "coordinates": {
                    "type": "crate",
                    "provider": "cratesio",
                    "name": "syn",
                    "revision": "1.0.14",
                }
            }
        )

        assert definition.described is None
        assert definition.licensed is None
        assert definition.files == []
        assert not definition.is_harvested

    def test_missing_coordinates_rejected(self):
        """Test coordinates are required."""
        with pytest.raises(ValidationError):
            Definition.model_validate({"described": {}})

    def test_definition_is_immutable(self):
        """Test decoded definitions are frozen."""
        definition = Definition.model_validate(SYN_DEFINITION)
        with pytest.raises(ValidationError):
            definition.files = []  # type: ignore[misc]


class TestCoordinates:
    """Test the echoed coordinates model."""

    def test_canonical_string(self):
        """Test echoed coordinates render in canonical form."""
        coords = Coordinates.model_validate(
            {"type": "npm", "provider": "npmjs", "namespace": "@babel", "name": "core", "revision": "7.24.0"}
        )
        assert str(coords) == "npm/npmjs/@babel/core/7.24.0"

    def test_canonical_string_with_pr(self):
        """Test curation PR is rendered as suffix."""
        coords = Coordinates.model_validate(
            {"type": "crate", "provider": "cratesio", "name": "syn", "revision": "1.0.14", "pr": 12}
        )
        assert str(coords) == "crate/cratesio/-/syn/1.0.14/pr/12"

    def test_to_coordinate(self):
        """Test conversion to a Coordinate value."""
        coords = Coordinates(shape="crate", provider="cratesio", name="syn", revision="1.0.14")
        coord = coords.to_coordinate()

        assert coord.shape == Shape.CRATE
        assert coord.provider == Provider.CRATESIO
        assert coord.version == semver.Version(1, 0, 14)
        assert str(coord) == str(coords)

    def test_to_coordinate_unknown_shape(self):
        """Test unknown shapes decode but cannot be converted."""
        coords = Coordinates(shape="cargo", provider="cratesio", name="syn", revision="1.0.14")
        assert str(coords) == "cargo/cratesio/-/syn/1.0.14"
        with pytest.raises(ValueError):
            coords.to_coordinate()
