"""Structural equality for JSON-like values."""
from __future__ import annotations

from typing import Any


def deep_equal(left: Any, right: Any) -> bool:
    """Compare two JSON-like values structurally.

    Mappings compare key sets and values recursively (key order ignored),
    lists compare element-wise. Scalars must match in kind as well as value,
    so ``True`` differs from ``1`` and ``None`` differs from an absent value.

    Example:
        >>> deep_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})
        True
        >>> deep_equal(1, True)
        False
    """
    if isinstance(left, dict) or isinstance(right, dict):
        if not (isinstance(left, dict) and isinstance(right, dict)):
            return False
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if not (isinstance(left, (list, tuple)) and isinstance(right, (list, tuple))):
            return False
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right

    if left is None or right is None:
        return left is right

    if type(left) is type(right):
        return left == right
    return _same_number(left, right)


def _same_number(left: Any, right: Any) -> bool:
    # 1 and 1.0 serialize to different JSON text but are the same number.
    numbers = (int, float)
    return isinstance(left, numbers) and isinstance(right, numbers) and left == right


__all__ = ["deep_equal"]
