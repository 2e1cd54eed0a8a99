"""OSM PBF protobuf schema (osmformat) used on the wire."""

from __future__ import annotations

from . import osmformat_pb2

__all__ = ["osmformat_pb2"]
