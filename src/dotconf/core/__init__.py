"""Core of dotconf: path access, storage, notification and the façade."""
from __future__ import annotations

from .config_store import DEFAULT_CONFIG_NAME, ConfigStore
from .exceptions import DotconfError, InvalidArgumentError
from .notify import ChangeNotifier
from .storage import STORAGE_BACKENDS, FileStorage, JsonStorage, YamlStorage
from .store import Store

__all__ = [
    "ChangeNotifier",
    "ConfigStore",
    "DEFAULT_CONFIG_NAME",
    "DotconfError",
    "FileStorage",
    "InvalidArgumentError",
    "JsonStorage",
    "STORAGE_BACKENDS",
    "Store",
    "YamlStorage",
]
