"""Field type helpers for PBF entities.

This module provides bounded integer fields matching the signed widths
the PBF wire format stores identifiers and metadata in.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def BoundedInt(*, ge: int, le: int, **kwargs: Any) -> FieldInfo:
    """Create a bounded integer field.

    This is a convenience wrapper around Pydantic's Field() that sets
    both ge= and le= constraints.

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as field metadata.

    Example:
        >>> class Entity(BaseEntity):
        ...     id: Annotated[int, BoundedInt(ge=INT64_MIN, le=INT64_MAX)]
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


Int64 = Annotated[int, BoundedInt(ge=INT64_MIN, le=INT64_MAX)]
"""Signed 64-bit integer (identifiers, changesets, timestamps)."""

Int32 = Annotated[int, BoundedInt(ge=INT32_MIN, le=INT32_MAX)]
"""Signed 32-bit integer (user ids, versions)."""
