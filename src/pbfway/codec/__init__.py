"""OSM PBF way codec.

This module provides the way encoder and parser, which exchange
``osmformat_pb2`` messages, and the numeric helpers they share.
"""

from __future__ import annotations

from .decoder import EntityParser, WayParser, decode_group, decode_way, metadata_of
from .encoder import ENTRY_SIZE, EncoderState, EntityEncoder, WayEncoder, encode_ways

__all__ = [
    "ENTRY_SIZE",
    "EncoderState",
    "EntityEncoder",
    "WayEncoder",
    "encode_ways",
    "EntityParser",
    "WayParser",
    "decode_way",
    "decode_group",
    "metadata_of",
]
