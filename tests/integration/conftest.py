"""Shared hooks for integration tests."""

import os

import pytest

_SKIP_NETWORK = pytest.mark.skip(
    reason="Requires network access. Set RUN_CLEARLYDEFINED_NETWORK_TESTS=1 to run",
)


def pytest_collection_modifyitems(config, items):
    """Skip every test under this directory unless RUN_CLEARLYDEFINED_NETWORK_TESTS=1."""
    if os.environ.get("RUN_CLEARLYDEFINED_NETWORK_TESTS") == "1":
        return
    here = os.path.dirname(__file__)
    for item in items:
        if str(item.path).startswith(here):
            item.add_marker(_SKIP_NETWORK)
