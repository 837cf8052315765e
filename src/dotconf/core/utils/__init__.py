"""Shared helpers for dotconf: path access, equality, overlay and I/O."""
from __future__ import annotations

from .compare import deep_equal
from .dotpath import (
    MISSING,
    delete_value,
    escape_key,
    get_value,
    has_value,
    set_value,
    split_path,
)
from .merge import overlay

__all__ = [
    "MISSING",
    "deep_equal",
    "delete_value",
    "escape_key",
    "get_value",
    "has_value",
    "overlay",
    "set_value",
    "split_path",
]
