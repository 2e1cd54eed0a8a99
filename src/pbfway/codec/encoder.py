"""Entity encoders for primitive groups.

An encoder keeps the entities of the next primitive group in memory and
hands back the finished group on finalize(). Encoders are single use and
not thread-safe: each block gets its own encoder and string table.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Generic, TypeVar

from ..config import GridParameters
from ..exceptions import EncodeError, EncoderStateError
from ..models import BaseEntity, Way
from .delta import delta_encode, to_grid
from ..proto import osmformat_pb2

if TYPE_CHECKING:
    from ..stringtable import StringTableEncoder

logger = logging.getLogger(__name__)

ENTRY_SIZE = 4
"""Byte cost unit of one array entry, used only by size estimates."""

E = TypeVar("E", bound=BaseEntity)


class EncoderState(enum.Enum):
    """Lifecycle of an entity encoder."""

    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


class EntityEncoder(ABC, Generic[E]):
    """Base class of single-use entity encoders.

    Subclasses implement _add() and _finalize(); this class guards them
    with the encoder state so nothing is accepted after finalize().
    """

    def __init__(self) -> None:
        self._state = EncoderState.ACCUMULATING

    @property
    def state(self) -> EncoderState:
        return self._state

    def add(self, entity: E) -> None:
        """Add an entity to the group being built.

        Raises:
            EncoderStateError: If the encoder has already been finalized
        """
        if self._state is EncoderState.FINALIZED:
            raise EncoderStateError(f"{type(self).__name__} is finalized, add() is not allowed")
        self._add(entity)

    def finalize(self) -> osmformat_pb2.PrimitiveGroup:
        """Finish the group and return it.

        Raises:
            EncoderStateError: If called more than once
        """
        if self._state is EncoderState.FINALIZED:
            raise EncoderStateError(f"{type(self).__name__} is already finalized")
        self._state = EncoderState.FINALIZED
        return self._finalize()

    @abstractmethod
    def estimate_size(self) -> int:
        """Return a conservative upper bound of the encoded group size in bytes."""

    @abstractmethod
    def _add(self, entity: E) -> None: ...

    @abstractmethod
    def _finalize(self) -> osmformat_pb2.PrimitiveGroup: ...


class WayEncoder(EntityEncoder[Way]):
    """Encodes ways into a primitive group.

    Tag and user name strings go into the block-wide string table; node
    references, latitudes and longitudes are stored as delta chains.
    Inline coordinates are written only when lat, lon and nodes all have
    the same length.

    Example:
        ```python
        from pbfway import Way, WayEncoder, StringTableEncoder

        strings = StringTableEncoder()
        encoder = WayEncoder(strings)
        encoder.add(Way(id=1, tags={"highway": "service"}, nodes=[100, 105, 110]))
        group = encoder.finalize()
        payload = group.SerializeToString()
        ```
    """

    def __init__(self, string_encoder: StringTableEncoder, grid: GridParameters | None = None) -> None:
        """Initialize the encoder.

        Args:
            string_encoder: Block-wide string table encoder
            grid: Coordinate grid of the block (default GridParameters())
        """
        super().__init__()
        self._strings = string_encoder
        self._grid = grid if grid is not None else GridParameters()
        self._group = osmformat_pb2.PrimitiveGroup()
        # Length of all members arrays (refs, plus lat/lon when present)
        self._members_length = 0
        # Length of all keys/vals arrays
        self._tags_length = 0

    def _add(self, way: Way) -> None:
        if not isinstance(way, Way):
            raise EncodeError(f"WayEncoder expects Way, got {type(way).__name__}")

        record = osmformat_pb2.Way(id=way.id)
        for key, value in way.tags.items():
            record.keys.append(self._strings.get_index(key))
            record.vals.append(self._strings.get_index(value))

        self._encode_info(way, record.info)
        record.refs.extend(delta_encode(way.nodes))

        member_multiply = 1
        if way.has_coordinates:
            grid = self._grid
            try:
                record.lat.extend(
                    delta_encode(to_grid(lat, grid.lat_offset, grid.granularity) for lat in way.lat)
                )
                record.lon.extend(
                    delta_encode(to_grid(lon, grid.lon_offset, grid.granularity) for lon in way.lon)
                )
            except (ValueError, OverflowError) as err:
                raise EncodeError(f"Way {way.id}: coordinate cannot be quantized: {err}") from err
            member_multiply += 2
        elif way.lat or way.lon:
            logger.debug(
                "Way %d: %d nodes but %d lat / %d lon values, skipping coordinates",
                way.id,
                len(way.nodes),
                len(way.lat),
                len(way.lon),
            )

        # Counters only move once the record is complete
        self._tags_length += len(way.tags) * ENTRY_SIZE
        self._members_length += len(way.nodes) * ENTRY_SIZE * member_multiply
        self._group.ways.append(record)

    def _encode_info(self, way: Way, target: osmformat_pb2.Info) -> None:
        if way.info is None:
            # Written as an empty submessage
            target.SetInParent()
            return
        info = way.info
        target.version = info.version
        target.timestamp = info.timestamp
        target.changeset = info.changeset
        target.uid = info.uid
        target.user_sid = self._strings.get_index(info.username)
        target.visible = info.visible

    def estimate_size(self) -> int:
        """Provide the approximate maximum size of the future group.

        Counts ENTRY_SIZE bytes per way, per tag and per member entry.
        Varint packing makes the actual size smaller.
        """
        return self._members_length + self._tags_length + len(self._group.ways) * ENTRY_SIZE

    def _finalize(self) -> osmformat_pb2.PrimitiveGroup:
        logger.debug("Finalized way group with %d ways", len(self._group.ways))
        return self._group


def encode_ways(
    ways: Iterable[Way],
    string_encoder: StringTableEncoder,
    grid: GridParameters | None = None,
) -> osmformat_pb2.PrimitiveGroup:
    """Encode ways into a finalized primitive group in one call.

    Args:
        ways: Ways to encode, in group order
        string_encoder: Block-wide string table encoder
        grid: Coordinate grid of the block

    Returns:
        Finalized primitive group
    """
    encoder = WayEncoder(string_encoder, grid)
    for way in ways:
        encoder.add(way)
    return encoder.finalize()
