"""File persistence for config documents.

A storage object owns one backing file. ``load`` never raises: a missing
file, an unreadable or undecodable one, or one whose top level is not a
mapping all come back as an empty document. ``save`` is write-through and
atomic; an I/O failure is logged and reported as a False return, while a
document that cannot be serialized is rejected as a malformed argument.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Type

import yaml

from .exceptions import InvalidArgumentError
from .utils.io import (
    read_json,
    read_yaml,
    write_json_atomic,
    write_yaml,
)

logger = logging.getLogger(__name__)


class FileStorage:
    """Base class for a serializer bound to a single file."""

    extension: str = ""
    decode_errors: tuple[type[BaseException], ...] = (ValueError,)
    encode_errors: tuple[type[BaseException], ...] = (TypeError, ValueError)

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Any:
        raise NotImplementedError

    def load(self) -> Dict[str, Any]:
        try:
            data = self._read()
        except FileNotFoundError:
            return {}
        except (OSError, *self.decode_errors) as exc:
            logger.warning("Failed to load %s: %s; starting with an empty document", self._path, exc)
            return {}

        if not isinstance(data, dict):
            logger.warning(
                "Ignoring %s: top-level value is %s, not a mapping",
                self._path,
                type(data).__name__,
            )
            return {}
        return data

    def _write(self, document: Dict[str, Any]) -> None:
        raise NotImplementedError

    def save(self, document: Dict[str, Any]) -> bool:
        """Write ``document`` atomically; returns False when the write failed."""
        try:
            self._write(document)
        except OSError as exc:
            logger.error("Failed to save config to %s: %s", self._path, exc)
            return False
        except self.encode_errors as exc:
            raise InvalidArgumentError(
                f"Value cannot be stored in {self._path.name}: {exc}",
                context={"path": str(self._path)},
            ) from exc
        logger.debug("Saved %d top-level keys to %s", len(document), self._path)
        return True


class JsonStorage(FileStorage):
    extension = "json"

    def _read(self) -> Any:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        return read_json(self._path)

    def _write(self, document: Dict[str, Any]) -> None:
        write_json_atomic(self._path, document)


class YamlStorage(FileStorage):
    extension = "yaml"
    decode_errors = (ValueError, yaml.YAMLError)
    encode_errors = (TypeError, ValueError, yaml.YAMLError)

    def _read(self) -> Any:
        if not self._path.exists():
            raise FileNotFoundError(self._path)
        return read_yaml(self._path, default={})

    def _write(self, document: Dict[str, Any]) -> None:
        write_yaml(self._path, document)


STORAGE_BACKENDS: Dict[str, Type[FileStorage]] = {
    "json": JsonStorage,
    "yaml": YamlStorage,
}


__all__ = [
    "FileStorage",
    "JsonStorage",
    "YamlStorage",
    "STORAGE_BACKENDS",
]
