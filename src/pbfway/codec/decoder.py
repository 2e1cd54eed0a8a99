"""Entity parsers for primitive groups.

A parser turns one wire record into an entity, resolving string indices
against the block's string table and coordinates against the block's grid.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from google.protobuf.message import DecodeError as ProtobufDecodeError
from pydantic import ValidationError

from ..config import GridParameters
from ..exceptions import DecodeError
from ..models import BaseEntity, Info, Way
from ..proto import osmformat_pb2
from .delta import delta_decode, from_grid

if TYPE_CHECKING:
    from ..stringtable import StringTable

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)
R = TypeVar("R")


class EntityParser(ABC, Generic[R, E]):
    """Base class of entity parsers.

    Holds the block's string table and an optional consumer callback that
    receives every successfully parsed entity.
    """

    def __init__(self, string_table: StringTable, callback: Callable[[E], None] | None = None) -> None:
        self.string_table = string_table
        self.callback = callback

    @abstractmethod
    def parse(self, message: R | bytes) -> E:
        """Parse one record, pass it to the callback and return it."""

    def _emit(self, entity: E) -> E:
        if self.callback is not None:
            self.callback(entity)
        return entity

    def parse_tags(self, keys: Sequence[int], vals: Sequence[int]) -> dict[str, str]:
        """Resolve parallel key/value index arrays to a tag mapping.

        Raises:
            DecodeError: If the arrays differ in length
            StringIndexError: If an index is outside the string table
        """
        if len(keys) != len(vals):
            raise DecodeError(f"Tag arrays differ in length: {len(keys)} keys, {len(vals)} vals")
        resolve = self.string_table.resolve
        return {resolve(key): resolve(val) for key, val in zip(keys, vals)}

    def parse_info(self, info: osmformat_pb2.Info | None) -> Info | None:
        """Convert a metadata submessage; absent or empty metadata gives None.

        Unset fields take the wire defaults: version -1, visible True and
        zero for everything else.
        """
        if info is None or not info.ListFields():
            return None
        return Info(
            changeset=info.changeset,
            timestamp=info.timestamp,
            uid=info.uid,
            username=self.string_table.resolve(info.user_sid),
            version=info.version,
            visible=info.visible if info.HasField("visible") else True,
        )


def metadata_of(message: osmformat_pb2.Way) -> osmformat_pb2.Info | None:
    """Return the metadata submessage, or None when it is unset or empty."""
    if not message.HasField("info") or not message.info.ListFields():
        return None
    return message.info


class WayParser(EntityParser[osmformat_pb2.Way, Way]):
    """Parses way records.

    Example:
        ```python
        from pbfway import StringTable, WayParser

        parser = WayParser(StringTable.from_bytes(table_bytes), callback=ways.append)
        for record in group.ways:
            parser.parse(record)
        ```
    """

    def __init__(
        self,
        string_table: StringTable,
        grid: GridParameters | None = None,
        callback: Callable[[Way], None] | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            string_table: String table of the block
            grid: Coordinate grid of the block (default GridParameters())
            callback: Called with every parsed way
        """
        super().__init__(string_table, callback)
        self.grid = grid if grid is not None else GridParameters()

    def parse(self, message: osmformat_pb2.Way | bytes) -> Way:
        """Parse a way record.

        Args:
            message: ``Way`` message, or its serialized bytes

        Returns:
            Decoded way

        Raises:
            DecodeError: If the bytes are not a valid ``Way`` message
            StringIndexError: If a string index is outside the table
        """
        if isinstance(message, (bytes, bytearray, memoryview)):
            message = _read_record(bytes(message))

        tags = self.parse_tags(message.keys, message.vals)
        info = self.parse_info(metadata_of(message))
        nodes = delta_decode(message.refs)

        lat: list[float] = []
        lon: list[float] = []
        if len(message.lat) == len(message.refs) and len(message.lat) == len(message.lon):
            grid = self.grid
            lat = [from_grid(v, grid.lat_offset, grid.granularity) for v in delta_decode(message.lat)]
            lon = [from_grid(v, grid.lon_offset, grid.granularity) for v in delta_decode(message.lon)]
        elif message.lat or message.lon:
            logger.debug(
                "Way %d: %d refs but %d lat / %d lon deltas, ignoring coordinates",
                message.id,
                len(message.refs),
                len(message.lat),
                len(message.lon),
            )

        try:
            way = Way(id=message.id, tags=tags, info=info, nodes=nodes, lat=lat, lon=lon)
        except ValidationError as e:
            raise DecodeError(f"Failed to construct Way {message.id}: {e}") from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%r", way)
        return self._emit(way)


def _read_record(data: bytes) -> osmformat_pb2.Way:
    record = osmformat_pb2.Way()
    try:
        record.ParseFromString(data)
    except ProtobufDecodeError as e:
        raise DecodeError(f"Malformed way message: {e}") from e
    return record


def decode_way(data: bytes, string_table: StringTable, grid: GridParameters | None = None) -> Way:
    """Decode the bytes of a single ``Way`` message.

    Args:
        data: Serialized way
        string_table: String table of the block
        grid: Coordinate grid of the block

    Returns:
        Decoded way
    """
    return WayParser(string_table, grid).parse(data)


def decode_group(
    data: bytes,
    string_table: StringTable,
    grid: GridParameters | None = None,
    callback: Callable[[Way], None] | None = None,
) -> list[Way]:
    """Decode every way of a serialized primitive group.

    Args:
        data: Serialized ``PrimitiveGroup``
        string_table: String table of the block
        grid: Coordinate grid of the block
        callback: Called with every parsed way, in group order

    Returns:
        Decoded ways in group order

    Raises:
        DecodeError: If the group or one of its ways is malformed
    """
    group = osmformat_pb2.PrimitiveGroup()
    try:
        group.ParseFromString(data)
    except ProtobufDecodeError as e:
        raise DecodeError(f"Malformed primitive group: {e}") from e

    parser = WayParser(string_table, grid, callback)
    return [parser.parse(record) for record in group.ways]
