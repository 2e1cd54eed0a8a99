"""OSM entity models handled by the codec."""

from __future__ import annotations

from pydantic import Field

from .base import BaseEntity
from .fields import Int32, Int64


class Info(BaseEntity):
    """Entity metadata.

    Attributes:
        changeset: Changeset the entity version belongs to
        timestamp: Modification timestamp, in units of the block's date granularity
        uid: Id of the user that made the change
        username: Name of the user that made the change
        version: Entity version
        visible: False for deleted entities in history files
    """

    changeset: Int64 = 0
    timestamp: Int64 = 0
    uid: Int32 = 0
    username: str = ""
    version: Int32 = 0
    visible: bool = True


class Way(BaseEntity):
    """An ordered sequence of node references with tags and optional inline coordinates.

    ``lat`` and ``lon`` are either both empty or both the same length as
    ``nodes``. Anything else is treated as "no coordinates" by the codec.

    Example:
        >>> way = Way(id=7, tags={"highway": "residential"}, nodes=[100, 105, 110])
        >>> way.has_coordinates
        False
    """

    id: Int64
    tags: dict[str, str] = Field(default_factory=dict)
    info: Info | None = None
    nodes: list[Int64] = Field(default_factory=list)
    lat: list[float] = Field(default_factory=list)
    lon: list[float] = Field(default_factory=list)

    @property
    def has_coordinates(self) -> bool:
        """Whether inline coordinates are present for every node."""
        return len(self.nodes) > 0 and len(self.lat) == len(self.lon) == len(self.nodes)

    @property
    def is_closed(self) -> bool:
        """Whether the way forms a closed ring."""
        return len(self.nodes) >= 4 and self.nodes[0] == self.nodes[-1]
