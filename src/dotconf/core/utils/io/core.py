"""Core I/O utilities for dotconf.

Single source of truth for safe file access patterns:
- Atomic writes with fsync and temp-file replacement
- Text file read operations
- Lazy parent directory creation

This module provides the foundational I/O primitives used by json.py and yaml.py.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def atomic_write(
    path: Path,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write to ``path`` atomically using a temp file + fsync + rename.

    - Parent directory is created if missing
    - Data is written to a temporary file in the same directory
    - File is fsync'd, then atomically replaced
    - Any leftover temp file is cleaned up on failure

    Args:
        path: Target file path
        write_fn: Callable that writes content to the file object
        encoding: Text encoding (default: utf-8)
    """
    path = Path(path)
    ensure_parent_dir(path)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(str(tmp_path), str(path))
    finally:
        if tmp_path is not None and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError as exc:
                logger.debug("Could not remove temp file %s: %s", tmp_path, exc)


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    """Read a text file; raises FileNotFoundError when it does not exist."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding=encoding)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> None:
    """Atomically write text to ``path``."""

    def _writer(f: TextIO) -> None:
        f.write(content)

    atomic_write(Path(path), _writer, encoding=encoding)


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
]
