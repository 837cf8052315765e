"""Dot-delimited path access over nested mappings.

Paths address locations in a document tree: ``"window.size.width"`` walks
three mappings. A literal dot inside a key is written ``\\.``::

    >>> split_path(r"baz\\.boo.bar")
    ['baz.boo', 'bar']

Reads never create anything; writes create missing intermediate mappings and
silently replace a scalar found on the way (``a.b = 1`` then ``a.b.c = 2``
leaves ``{"a": {"b": {"c": 2}}}``). Lists are values, never containers to walk.

The backslash itself has no escape. A key ending in ``\\`` is addressable only
as the last segment of a path; anywhere else its trailing backslash reads as
the start of an escaped dot, and ``escape_key`` cannot make it reversible.
"""
from __future__ import annotations

from typing import Any, List, MutableMapping


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict) -> "_Missing":
        return self


MISSING: Any = _Missing()
"""Sentinel for an absent location, distinct from a stored ``None``."""


def split_path(path: str) -> List[str]:
    """Split ``path`` into segments, honoring ``\\.`` escapes."""
    raw = path.split(".")
    segments: List[str] = []
    i = 0
    while i < len(raw):
        segment = raw[i]
        while segment.endswith("\\") and i + 1 < len(raw):
            i += 1
            segment = segment[:-1] + "." + raw[i]
        segments.append(segment)
        i += 1
    return segments


def escape_key(key: str) -> str:
    """Escape literal dots so ``key`` is addressed as a single segment."""
    return key.replace(".", "\\.")


def _walk(doc: MutableMapping[str, Any], segments: List[str]) -> Any:
    node: Any = doc
    for segment in segments:
        if not isinstance(node, dict) or segment not in node:
            return MISSING
        node = node[segment]
    return node


def get_value(doc: MutableMapping[str, Any], path: str) -> Any:
    """Return the value at ``path`` or ``MISSING``."""
    return _walk(doc, split_path(path))


def has_value(doc: MutableMapping[str, Any], path: str) -> bool:
    # Only real dict keys count; attributes of the container never do.
    return _walk(doc, split_path(path)) is not MISSING


def set_value(doc: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at ``path``, creating intermediate mappings in place."""
    segments = split_path(path)
    node = doc
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value


def delete_value(doc: MutableMapping[str, Any], path: str) -> bool:
    """Remove the key at ``path``; returns False when nothing was there."""
    segments = split_path(path)
    parent = _walk(doc, segments[:-1])
    if not isinstance(parent, dict) or segments[-1] not in parent:
        return False
    del parent[segments[-1]]
    return True


__all__ = [
    "MISSING",
    "split_path",
    "escape_key",
    "get_value",
    "has_value",
    "set_value",
    "delete_value",
]
