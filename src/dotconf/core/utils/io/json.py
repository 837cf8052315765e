"""JSON I/O utilities with atomic writes."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .core import read_text, write_text

# Default configuration (can be overridden per call)
DEFAULT_JSON_CONFIG: Dict[str, Any] = {
    "indent": 2,
    "sort_keys": False,
    "ensure_ascii": False,
    "encoding": "utf-8",
}

_MISSING = object()


def dump_json_string(
    data: Any,
    *,
    indent: int | str | None = None,
    sort_keys: bool | None = None,
    ensure_ascii: bool | None = None,
) -> str:
    """Serialize ``data`` with the configured formatting and a trailing newline.

    Raises ``TypeError``/``ValueError`` for values JSON cannot represent.
    """
    cfg = DEFAULT_JSON_CONFIG.copy()
    if indent is not None:
        cfg["indent"] = indent
    if sort_keys is not None:
        cfg["sort_keys"] = sort_keys
    if ensure_ascii is not None:
        cfg["ensure_ascii"] = ensure_ascii

    text = json.dumps(
        data,
        indent=cfg["indent"],
        sort_keys=cfg["sort_keys"],
        ensure_ascii=cfg["ensure_ascii"],
        allow_nan=False,
    )
    return text + "\n"


def read_json(file_path: Path | str, *, default: Any = _MISSING) -> Any:
    """Read JSON from ``file_path``.

    Args:
        file_path: Path to JSON file
        default: Value to return if file doesn't exist (optional).
                 If not provided, FileNotFoundError is raised.

    Raises:
        FileNotFoundError: If the file does not exist and no default is provided
        json.JSONDecodeError: If the content is not valid JSON
    """
    path = Path(file_path)
    if not path.exists():
        if default is not _MISSING:
            return default
        raise FileNotFoundError(f"JSON file not found: {path}")

    return json.loads(read_text(path, encoding=DEFAULT_JSON_CONFIG["encoding"]))


def write_json_atomic(file_path: Path | str, data: Any, **fmt: Any) -> None:
    """Atomically write JSON to ``file_path`` honoring config formatting.

    Serialization happens before the target is touched, so an unserializable
    payload leaves the existing file as it was.
    """
    content = dump_json_string(data, **fmt)
    write_text(Path(file_path), content, encoding=DEFAULT_JSON_CONFIG["encoding"])


__all__ = [
    "DEFAULT_JSON_CONFIG",
    "dump_json_string",
    "read_json",
    "write_json_atomic",
]
