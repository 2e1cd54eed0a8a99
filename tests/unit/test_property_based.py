"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from pbfway import (
    GridParameters,
    Info,
    StringTableEncoder,
    Way,
    WayEncoder,
    WayParser,
    osmformat_pb2,
)
from pbfway.codec.delta import delta_decode, delta_encode
from pbfway.models import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)
int32s = st.integers(min_value=INT32_MIN, max_value=INT32_MAX)

infos = st.builds(
    Info,
    changeset=int64s,
    timestamp=int64s,
    uid=int32s,
    username=st.text(max_size=20),
    version=int32s,
    visible=st.booleans(),
)

ways_without_coordinates = st.builds(
    Way,
    id=int64s,
    tags=st.dictionaries(st.text(max_size=10), st.text(max_size=10), max_size=5),
    info=st.none() | infos,
    nodes=st.lists(int64s, max_size=20),
)

grids = st.builds(
    GridParameters,
    granularity=st.integers(min_value=1, max_value=10000),
    lat_offset=st.integers(min_value=-(10**9), max_value=10**9),
    lon_offset=st.integers(min_value=-(10**9), max_value=10**9),
)


@st.composite
def ways_with_coordinates(draw: st.DrawFn) -> Way:
    size = draw(st.integers(min_value=1, max_value=20))
    return Way(
        id=draw(int64s),
        nodes=draw(st.lists(int64s, min_size=size, max_size=size)),
        lat=draw(st.lists(st.floats(-90.0, 90.0), min_size=size, max_size=size)),
        lon=draw(st.lists(st.floats(-180.0, 180.0), min_size=size, max_size=size)),
    )


def _roundtrip(way: Way, grid: GridParameters | None = None) -> Way:
    strings = StringTableEncoder()
    encoder = WayEncoder(strings, grid)
    encoder.add(way)
    record = encoder.finalize().ways[0]
    data = record.SerializeToString()
    return WayParser(strings.build(), grid).parse(data)


class TestDeltaProperties:
    """Property-based tests for delta chains."""

    @given(values=st.lists(int64s, max_size=50))
    def test_delta_roundtrip(self, values: list[int]) -> None:
        """Test decode(encode(x)) == x for int64 sequences."""
        assert delta_decode(delta_encode(values)) == values


class TestCodecProperties:
    """Property-based tests for the way codec."""

    @given(way=ways_without_coordinates)
    def test_roundtrip_without_coordinates(self, way: Way) -> None:
        """Test ways without coordinates decode to an equal way."""
        assert _roundtrip(way) == way

    @given(way=ways_with_coordinates(), grid=grids)
    def test_roundtrip_with_coordinates(self, way: Way, grid: GridParameters) -> None:
        """Test coordinates come back within one grid step."""
        decoded = _roundtrip(way, grid)
        tolerance = 1e-9 * grid.granularity

        assert decoded.nodes == way.nodes
        assert len(decoded.lat) == len(way.lat)
        assert len(decoded.lon) == len(way.lon)
        for got, expected in zip(decoded.lat, way.lat):
            assert abs(got - expected) <= tolerance
        for got, expected in zip(decoded.lon, way.lon):
            assert abs(got - expected) <= tolerance

    @given(
        nodes=st.lists(int64s, min_size=1, max_size=10),
        lat_size=st.integers(min_value=0, max_value=11),
        lon_size=st.integers(min_value=0, max_value=11),
    )
    def test_mismatched_coordinates_never_emitted(
        self, nodes: list[int], lat_size: int, lon_size: int
    ) -> None:
        """Test coordinates are written only as a full matched pair."""
        way = Way(id=1, nodes=nodes, lat=[1.0] * lat_size, lon=[2.0] * lon_size)
        encoder = WayEncoder(StringTableEncoder())
        encoder.add(way)
        record = encoder.finalize().ways[0]

        if lat_size == lon_size == len(nodes):
            assert len(record.lat) == len(record.lon) == len(nodes)
        else:
            assert len(record.lat) == 0
            assert len(record.lon) == 0

    @given(
        refs=st.lists(st.integers(-1000, 1000), min_size=1, max_size=10),
        lat_size=st.integers(min_value=0, max_value=11),
        lon_size=st.integers(min_value=0, max_value=11),
    )
    def test_mismatched_coordinates_never_decoded(
        self, refs: list[int], lat_size: int, lon_size: int
    ) -> None:
        """Test partial coordinate arrays decode to no coordinates."""
        record = osmformat_pb2.Way(id=1, refs=refs, lat=[1] * lat_size, lon=[1] * lon_size)
        way = WayParser(StringTableEncoder().build()).parse(record)

        if lat_size == lon_size == len(refs):
            assert len(way.lat) == len(way.lon) == len(refs)
        else:
            assert way.lat == []
            assert way.lon == []

    @given(ways=st.lists(ways_without_coordinates, max_size=10))
    def test_estimate_monotonic(self, ways: list[Way]) -> None:
        """Test the size estimate never decreases."""
        encoder = WayEncoder(StringTableEncoder())
        previous = encoder.estimate_size()
        assert previous == 0
        for way in ways:
            encoder.add(way)
            current = encoder.estimate_size()
            assert current >= previous
            previous = current
