"""pbfway: OSM PBF Way Codec

A Python library that transcodes OpenStreetMap ways between pydantic
entities and the OSM PBF wire format: tag strings through a block-wide
string table, node references as delta chains, and optional inline
coordinates quantized to the block's grid.

Key Features:
- Pydantic-based Way and Info entities
- Bit-exact protobuf wire format of osmformat.proto
- Conservative group size estimates for blob assembly
- Messages built with the protobuf runtime (no protoc step)

Quick Start:
    >>> from pbfway import StringTableEncoder, Way, WayEncoder, decode_group
    >>>
    >>> strings = StringTableEncoder()
    >>> encoder = WayEncoder(strings)
    >>> encoder.add(Way(id=1, tags={"highway": "service"}, nodes=[100, 105, 110]))
    >>> data = encoder.finalize().SerializeToString()
    >>> ways = decode_group(data, strings.build())
    >>> ways[0].nodes
    [100, 105, 110]
"""

from __future__ import annotations

from .codec import (
    ENTRY_SIZE,
    EncoderState,
    WayEncoder,
    WayParser,
    decode_group,
    decode_way,
    encode_ways,
)
from .config import GridParameters
from .exceptions import (
    DecodeError,
    EncodeError,
    EncoderStateError,
    PbfWayError,
    StringIndexError,
)
from .models import Info, Way
from .proto import osmformat_pb2
from .stringtable import StringTable, StringTableEncoder

__version__ = "0.1.0"

__all__ = [
    # Entities
    "Way",
    "Info",
    # Codec
    "WayEncoder",
    "WayParser",
    "EncoderState",
    "ENTRY_SIZE",
    "encode_ways",
    "decode_way",
    "decode_group",
    # Wire messages
    "osmformat_pb2",
    # Block context
    "StringTable",
    "StringTableEncoder",
    "GridParameters",
    # Exceptions
    "PbfWayError",
    "EncodeError",
    "EncoderStateError",
    "DecodeError",
    "StringIndexError",
    # Version
    "__version__",
]
