"""Numeric helpers shared by encoders and parsers.

Delta chains store each value as the signed difference from the previous
one (the first relative to zero). Coordinates are stored as integers on the
block's grid: ``degree = 1e-9 * (offset + granularity * v)``.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models.fields import INT64_MAX, INT64_MIN

NANO = 1e-9

_MASK64 = (1 << 64) - 1


def wrap_int64(value: int) -> int:
    """Wrap an integer to signed 64-bit two's complement."""
    value &= _MASK64
    return value - (1 << 64) if value >> 63 else value


def delta_encode(values: Iterable[int]) -> list[int]:
    """Turn absolute values into a delta chain.

    Example:
        >>> delta_encode([100, 105, 110])
        [100, 5, 5]
    """
    deltas = []
    previous = 0
    for value in values:
        deltas.append(wrap_int64(value - previous))
        previous = value
    return deltas


def delta_decode(deltas: Iterable[int]) -> list[int]:
    """Rebuild absolute values from a delta chain by cumulative sum.

    Example:
        >>> delta_decode([100, 5, 5])
        [100, 105, 110]
    """
    values = []
    current = 0
    for delta in deltas:
        current = wrap_int64(current + delta)
        values.append(current)
    return values


def to_grid(degree: float, offset: int, granularity: int) -> int:
    """Quantize a degree value to the block grid.

    Raises:
        ValueError: If degree is NaN or the grid value does not fit in int64
        OverflowError: If degree is infinite
    """
    value = round((degree / NANO - offset) / granularity)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"Grid value {value} for {degree} degrees is outside the int64 range")
    return value


def from_grid(value: int, offset: int, granularity: int) -> float:
    """Convert a grid value back to degrees."""
    return NANO * (offset + granularity * value)
