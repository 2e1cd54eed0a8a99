"""Exception hierarchy for pbfway.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PbfWayError for easy catching of any pbfway-specific error.
"""

from __future__ import annotations


class PbfWayError(Exception):
    """Base exception for all pbfway errors."""

    pass


class EncodeError(PbfWayError):
    """Raised when encoding a way fails.

    Examples:
        - Value does not fit the wire type
        - Entity is not a Way
    """

    pass


class EncoderStateError(EncodeError):
    """Raised when an encoder is used after it has been finalized.

    This is a programming error in the caller, not a data problem.
    """

    pass


class DecodeError(PbfWayError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Bytes that do not parse as the expected protobuf message
        - Tag key/value arrays of different length
        - Decoded values outside the int64/int32 range
    """

    pass


class StringIndexError(DecodeError):
    """Raised when a string table index does not exist in the block's table."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"String index {index} out of range for table of size {size}")
        self.index = index
        self.size = size
