"""Stable error types for the paths subsystem."""

from __future__ import annotations


class DotconfPathError(ValueError):
    """Raised when one directory-resolution strategy cannot produce a location."""

    pass


__all__ = ["DotconfPathError"]
