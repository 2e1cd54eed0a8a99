"""Block-wide coordinate grid configuration.

Every PBF primitive block carries a granularity and a pair of offsets that
define the integer grid coordinates are stored on. They are owned by the
surrounding file-format layer and handed to the codec per block.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_GRANULARITY = 100
DEFAULT_OFFSET = 0


@dataclass(frozen=True)
class GridParameters:
    """Coordinate grid of one primitive block.

    A stored integer coordinate ``v`` maps to degrees as
    ``1e-9 * (offset + granularity * v)``.

    Attributes:
        granularity: Grid step in nanodegrees (default 100).
        lat_offset: Latitude offset of the grid in nanodegrees (default 0).
        lon_offset: Longitude offset of the grid in nanodegrees (default 0).

    Examples:
        ```python
        from pbfway.config import GridParameters

        grid = GridParameters()  # 100 nanodegree grid, no offset
        coarse = GridParameters(granularity=1000, lat_offset=-500)
        ```
    """

    granularity: int = DEFAULT_GRANULARITY
    lat_offset: int = DEFAULT_OFFSET
    lon_offset: int = DEFAULT_OFFSET

    def __post_init__(self) -> None:
        """Validate grid parameters."""
        if not isinstance(self.granularity, int) or isinstance(self.granularity, bool):
            raise TypeError(f"granularity must be an int, got {type(self.granularity).__name__}")
        if self.granularity <= 0:
            raise ValueError(f"granularity must be > 0, got {self.granularity}")
        for name in ("lat_offset", "lon_offset"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    @classmethod
    def from_block(
        cls,
        granularity: int | None = None,
        lat_offset: int | None = None,
        lon_offset: int | None = None,
    ) -> GridParameters:
        """Build grid parameters from optional primitive block fields.

        Unset fields in a PrimitiveBlock fall back to the format defaults.
        """
        return cls(
            granularity=DEFAULT_GRANULARITY if granularity is None else granularity,
            lat_offset=DEFAULT_OFFSET if lat_offset is None else lat_offset,
            lon_offset=DEFAULT_OFFSET if lon_offset is None else lon_offset,
        )
