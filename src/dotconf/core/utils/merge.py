"""Default-value overlay for documents."""
from __future__ import annotations

import copy
from typing import Any, Dict, Mapping


def overlay(defaults: Mapping[str, Any] | None, values: Mapping[str, Any]) -> Dict[str, Any]:
    """Shallow-merge ``values`` over ``defaults`` without mutating inputs.

    Defaults are written first and values second, so a value always wins at
    the same top-level key while unrelated default keys survive.

    Example:
        >>> overlay({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'d': 3}}
    """
    result: Dict[str, Any] = copy.deepcopy(dict(defaults or {}))
    for key, value in values.items():
        result[key] = value
    return result


__all__ = ["overlay"]
