"""Terrain generation error hierarchy."""

from __future__ import annotations


class TerrainError(Exception):
    """Base error for terrain generation."""


class TerrainConfigError(TerrainError, ValueError):
    """Generation parameters or term flags are invalid.

    Attributes:
        field: Name of the offending option, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
