"""Project name discovery from the nearest ``pyproject.toml``."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional

from ..io import read_text
from .errors import DotconfPathError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "pyproject.toml"


def find_manifest(start: Path) -> Optional[Path]:
    """Return the closest ``pyproject.toml`` at or above ``start``."""
    current = Path(start).absolute()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def read_project_name(manifest: Path) -> str:
    """Return ``[project].name`` from ``manifest``.

    Raises:
        DotconfPathError: If the manifest cannot be read, parsed, or has no name
    """
    try:
        data = tomllib.loads(read_text(manifest))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise DotconfPathError(f"Unreadable manifest {manifest}: {exc}") from exc

    project = data.get("project")
    name = project.get("name") if isinstance(project, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise DotconfPathError(f"Manifest {manifest} declares no [project].name")
    return name.strip()


def infer_project_name(search_from: Path) -> str:
    """Infer a project name from the manifest nearest to ``search_from``.

    Raises:
        DotconfPathError: If no manifest is found or it declares no usable name
    """
    manifest = find_manifest(search_from)
    if manifest is None:
        raise DotconfPathError(f"No {MANIFEST_NAME} found above {search_from}")
    name = read_project_name(manifest)
    logger.debug("Inferred project name %r from %s", name, manifest)
    return name


__all__ = [
    "MANIFEST_NAME",
    "find_manifest",
    "read_project_name",
    "infer_project_name",
]
