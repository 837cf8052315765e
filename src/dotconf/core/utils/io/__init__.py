"""I/O utilities for dotconf.

This package provides safe, atomic file operations:
- Core: atomic writes, lazy directory creation, text I/O
- JSON: formatted read/write
- YAML: block-style read/write
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_parent_dir,
    read_text,
    write_text,
)
from .json import (
    DEFAULT_JSON_CONFIG,
    dump_json_string,
    read_json,
    write_json_atomic,
)
from .yaml import (
    dump_yaml_string,
    read_yaml,
    write_yaml,
)

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
    # json
    "DEFAULT_JSON_CONFIG",
    "dump_json_string",
    "read_json",
    "write_json_atomic",
    # yaml
    "dump_yaml_string",
    "read_yaml",
    "write_yaml",
]
