"""
Persistent hierarchical key-value configuration store.

Values are addressed with dot-delimited paths (``"window.size.width"``),
kept in a JSON (or YAML) file and observable for change. Every operation
re-reads the backing file first and every mutation writes it straight back,
so the file is always the source of truth for a single owning process.
"""
from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from .exceptions import InvalidArgumentError, require_key
from .notify import ChangeNotifier, Listener
from .storage import STORAGE_BACKENDS, FileStorage
from .store import Store
from .utils import MISSING
from .utils.paths import DEFAULT_PROJECT_SUFFIX, DirectoryResolver, resolve_config_dir

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "config"


class ConfigStore:
    """Load, mutate, persist and watch a nested configuration document.

    Options (all keyword-only):
    - ``cwd``: directory holding the file; wins over every other option
    - ``project_name``: names the per-user app-data directory
    - ``config_name``: base file name (default ``"config"``)
    - ``defaults``: mapping merged under persisted values at construction
    - ``serialization``: ``"json"`` (default) or ``"yaml"``
    - ``file_extension``: overrides the extension implied by ``serialization``
    - ``project_suffix``: appended to the app-data directory name
    - ``search_from``: where project-name inference starts (default: CWD)
    - ``resolver``: ``(project_name, search_from) -> directory`` used when
      ``cwd`` is not given
    """

    def __init__(
        self,
        *,
        cwd: Optional[Union[str, Path]] = None,
        project_name: Optional[str] = None,
        config_name: str = DEFAULT_CONFIG_NAME,
        defaults: Optional[Mapping[str, Any]] = None,
        serialization: str = "json",
        file_extension: Optional[str] = None,
        project_suffix: Optional[str] = DEFAULT_PROJECT_SUFFIX,
        search_from: Optional[Union[str, Path]] = None,
        resolver: Optional[DirectoryResolver] = None,
    ) -> None:
        if serialization not in STORAGE_BACKENDS:
            raise InvalidArgumentError(
                f"Unknown serialization {serialization!r}",
                context={"supported": sorted(STORAGE_BACKENDS)},
            )
        if not isinstance(config_name, str) or not config_name:
            raise InvalidArgumentError("Expected `config_name` to be a non-empty string")
        if defaults is not None and not isinstance(defaults, Mapping):
            raise InvalidArgumentError(
                f"Expected `defaults` to be a mapping, got {type(defaults).__name__}"
            )

        location = resolve_config_dir(
            cwd=cwd,
            project_name=project_name,
            project_suffix=project_suffix,
            search_from=search_from,
            resolver=resolver,
        )
        backend = STORAGE_BACKENDS[serialization]
        extension = (file_extension or backend.extension).lstrip(".")
        self._storage: FileStorage = backend(location.directory / f"{config_name}.{extension}")
        logger.debug("Config store at %s (via %s)", self._storage.path, location.strategy)

        self._store = Store(self._storage.load(), defaults)
        if self._store.apply_defaults():
            self._storage.save(self._store.document)
        self._notifier = ChangeNotifier()

    # ------------------------------------------------------------------
    # Synchronization
    # ------------------------------------------------------------------
    def _sync(self) -> Store:
        self._store.replace(self._storage.load())
        return self._store

    def _read(self, path: Optional[str]) -> Any:
        if path is None:
            return self._store.document
        return self._store.get(path)

    def _commit(self) -> None:
        # Listeners only hear about changes that reached the backing file.
        if self._storage.save(self._store.document):
            self._notifier.notify(self._read)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        require_key(key, operation="get")
        value = self._sync().get(key)
        return default if value is MISSING else value

    def set(self, key: Union[str, Mapping[str, Any]], value: Any = MISSING) -> None:
        """Set one path, or every path of a mapping, then persist and notify."""
        if isinstance(key, Mapping):
            if value is not MISSING:
                raise InvalidArgumentError("Pass either a mapping of paths or a key and a value")
            items = list(key.items())
            for path, _ in items:
                require_key(path, operation="set")
        else:
            require_key(key, operation="set")
            if value is MISSING:
                raise InvalidArgumentError(
                    "Use `delete()` to clear values", context={"key": key}
                )
            items = [(key, value)]

        store = self._sync()
        for path, item in items:
            store.set(path, copy.deepcopy(item))
        self._commit()

    def has(self, key: str) -> bool:
        require_key(key, operation="has")
        return self._sync().has(key)

    def delete(self, key: str) -> None:
        require_key(key, operation="delete")
        if self._sync().delete(key):
            self._commit()

    def clear(self) -> None:
        self._sync().clear()
        self._commit()

    def reset(self, *keys: str) -> None:
        """Restore each path to its default, removing it when it has none."""
        for key in keys:
            require_key(key, operation="reset")

        store = self._sync()
        for key in keys:
            default = store.default_for(key)
            if default is MISSING:
                store.delete(key)
            else:
                store.set(key, default)
        self._commit()

    def on_did_change(self, key: str, listener: Listener) -> Callable[[], None]:
        """Call ``listener(new_value, old_value)`` whenever the value at ``key`` changes.

        Returns an idempotent unsubscribe function.
        """
        require_key(key, operation="on_did_change")
        if not callable(listener):
            raise InvalidArgumentError("Expected `listener` to be callable")
        return self._notifier.subscribe(key, listener, self._sync().get(key))

    def on_did_any_change(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(new_store, old_store)`` whenever the document changes."""
        if not callable(listener):
            raise InvalidArgumentError("Expected `listener` to be callable")
        return self._notifier.subscribe(None, listener, self._sync().document)

    @property
    def size(self) -> int:
        return len(self._sync())

    @property
    def store(self) -> Dict[str, Any]:
        return self._sync().snapshot()

    @store.setter
    def store(self, value: Mapping[str, Any]) -> None:
        if not isinstance(value, Mapping):
            raise InvalidArgumentError(
                f"Expected `store` to be a mapping, got {type(value).__name__}"
            )
        for key in value:
            if not isinstance(key, str):
                raise InvalidArgumentError(
                    f"Expected top-level keys of type `str`, got {type(key).__name__}"
                )
        self._sync().replace(copy.deepcopy(dict(value)))
        self._commit()

    @property
    def path(self) -> Path:
        return self._storage.path

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(list(self.store.items()))

    def __repr__(self) -> str:
        return f"ConfigStore(path={str(self.path)!r})"


__all__ = ["ConfigStore", "DEFAULT_CONFIG_NAME"]
