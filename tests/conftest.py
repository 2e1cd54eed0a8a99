"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from pbfway import GridParameters, Info, StringTableEncoder, Way


@pytest.fixture
def string_encoder() -> StringTableEncoder:
    """Fresh block-wide string table encoder."""
    return StringTableEncoder()


@pytest.fixture
def grid() -> GridParameters:
    """Default 100 nanodegree grid."""
    return GridParameters()


@pytest.fixture
def sample_info() -> Info:
    """Metadata for a typical way version."""
    return Info(
        changeset=123456789,
        timestamp=1700000000,
        uid=4242,
        username="mapper",
        version=3,
        visible=True,
    )


@pytest.fixture
def sample_way(sample_info: Info) -> Way:
    """Way with tags, metadata and inline coordinates."""
    return Way(
        id=987654321,
        tags={"highway": "residential", "name": "Main Street"},
        info=sample_info,
        nodes=[100, 105, 110],
        lat=[50.0, 50.0001, 50.0002],
        lon=[8.5, 8.5003, 8.4999],
    )
