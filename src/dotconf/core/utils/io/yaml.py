"""YAML I/O utilities with atomic writes."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .core import read_text, write_text


def dump_yaml_string(data: Any, sort_keys: bool = False) -> str:
    """Dump data to a block-style YAML string.

    Raises ``yaml.representer.RepresenterError`` for unsupported values.
    """
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=sort_keys,
        allow_unicode=True,
    )


def read_yaml(path: Path | str, default: Any = None) -> Any:
    """Read YAML from ``path``; returns ``default`` when the file is missing or empty.

    Parse errors (``yaml.YAMLError``) propagate to the caller.
    """
    path = Path(path)
    if not path.exists():
        return default
    data = yaml.safe_load(read_text(path))
    return data if data is not None else default


def write_yaml(path: Path | str, data: Any) -> None:
    """Atomically write YAML data to ``path``."""
    write_text(Path(path), dump_yaml_string(data))


__all__ = [
    "dump_yaml_string",
    "read_yaml",
    "write_yaml",
]
