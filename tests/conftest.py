"""Shared test fixtures for ghrelease."""

from __future__ import annotations

import pytest


@pytest.fixture
def git_tags() -> list[str]:
    """A git tag listing with release tags out of order and some noise."""
    return [
        "release-v1.9.0",
        "v2.0.0",
        "release-v1.10.0",
        "release-v1.2.3",
        "release-v1.10.0-rc1",
        "nightly",
        "release-v01.02.04",
    ]


@pytest.fixture
def params_tags() -> list[str]:
    """A params repo tag listing covering two repositories."""
    return [
        "tkgi-upgrade-release-v1.0.0",
        "tkgi-upgrade-release-v1.1.0",
        "tkgi-install-release-v2.0.0",
        "unrelated-tag",
    ]


@pytest.fixture
def well_formed_versions() -> list[str]:
    """Dotted versions of mixed length for ordering properties."""
    return ["0", "1", "1.2", "1.2.0", "1.2.3", "01.2.3", "1.10.0", "1.9.9", "2.0.0.1"]
