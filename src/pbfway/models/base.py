"""Base entity class and pbfway-specific Pydantic configuration.

This module provides the BaseEntity class that all OSM entities inherit from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseEntity(BaseModel):
    """Base class for all pbfway entities.

    Entities are built once per record, by the producer on the encode side
    or by a parser on the decode side, and are immutable afterwards.
    """

    model_config = ConfigDict(
        strict=False,
        # Entities are handed to consumers and must not change afterwards
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
