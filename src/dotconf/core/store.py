"""In-memory document with path-addressed CRUD and default values."""
from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

from .utils import (
    MISSING,
    delete_value,
    get_value,
    has_value,
    overlay,
    set_value,
)


class Store:
    """Owns the nested mapping a config store reads and writes.

    The document root is always a ``dict``. Defaults are kept separately so
    they can be overlaid under the document and consulted by ``reset``.
    """

    def __init__(
        self,
        document: Optional[Mapping[str, Any]] = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._defaults: Dict[str, Any] = copy.deepcopy(dict(defaults or {}))
        self._document: Dict[str, Any] = {}
        self.replace(document)

    @property
    def document(self) -> Dict[str, Any]:
        return self._document

    @property
    def defaults(self) -> Dict[str, Any]:
        return self._defaults

    def replace(self, document: Optional[Mapping[str, Any]]) -> None:
        self._document = dict(document) if isinstance(document, Mapping) else {}

    def apply_defaults(self) -> bool:
        """Overlay the document on the defaults; True when keys were added."""
        merged = overlay(self._defaults, self._document)
        changed = merged.keys() != self._document.keys()
        self._document = merged
        return changed

    def default_for(self, path: str) -> Any:
        value = get_value(self._defaults, path)
        return MISSING if value is MISSING else copy.deepcopy(value)

    def get(self, path: str) -> Any:
        return get_value(self._document, path)

    def has(self, path: str) -> bool:
        return has_value(self._document, path)

    def set(self, path: str, value: Any) -> None:
        set_value(self._document, path, value)

    def delete(self, path: str) -> bool:
        return delete_value(self._document, path)

    def clear(self) -> None:
        self._document = {}

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._document)

    def __len__(self) -> int:
        return len(self._document)


__all__ = ["Store"]
