"""Pydantic entity modeling for pbfway.

This module provides the OSM entities the codec transcodes and the bounded
integer field helpers they are declared with.
"""

from __future__ import annotations

from .base import BaseEntity
from .entities import Info, Way
from .fields import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, BoundedInt, Int32, Int64

__all__ = [
    "BaseEntity",
    "Info",
    "Way",
    "BoundedInt",
    "Int32",
    "Int64",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
]
