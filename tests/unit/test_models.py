"""Unit tests for entity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pbfway import Info, Way
from pbfway.models import INT32_MAX, INT64_MAX


class TestWay:
    """Test Way entity."""

    def test_defaults(self) -> None:
        """Test optional fields default to empty."""
        way = Way(id=1)

        assert way.tags == {}
        assert way.info is None
        assert way.nodes == []
        assert way.lat == []
        assert way.lon == []

    def test_has_coordinates(self) -> None:
        """Test the coordinate cardinality check."""
        assert Way(id=1, nodes=[1, 2], lat=[1.0, 2.0], lon=[3.0, 4.0]).has_coordinates
        assert not Way(id=1, nodes=[1, 2]).has_coordinates
        assert not Way(id=1, nodes=[1, 2, 3], lat=[1.0, 2.0], lon=[3.0, 4.0, 5.0]).has_coordinates
        assert not Way(id=1, nodes=[1, 2], lat=[1.0, 2.0]).has_coordinates

    def test_is_closed(self) -> None:
        """Test ring detection."""
        assert Way(id=1, nodes=[1, 2, 3, 1]).is_closed
        assert not Way(id=1, nodes=[1, 2, 3]).is_closed

    def test_id_out_of_int64(self) -> None:
        """Test identifiers are bounded to int64."""
        with pytest.raises(ValidationError):
            Way(id=INT64_MAX + 1)

        with pytest.raises(ValidationError):
            Way(id=1, nodes=[INT64_MAX + 1])

    def test_frozen(self) -> None:
        """Test entities cannot be reassigned."""
        way = Way(id=1)
        with pytest.raises(ValidationError):
            way.id = 2  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Way(id=1, refs=[1])  # type: ignore[call-arg]


class TestInfo:
    """Test Info entity."""

    def test_defaults(self) -> None:
        """Test zero-valued defaults."""
        info = Info()
        assert info.changeset == 0
        assert info.username == ""
        assert info.visible is True

    def test_uid_bounded_to_int32(self) -> None:
        """Test 32-bit fields."""
        with pytest.raises(ValidationError):
            Info(uid=INT32_MAX + 1)

        with pytest.raises(ValidationError):
            Info(version=INT32_MAX + 1)
