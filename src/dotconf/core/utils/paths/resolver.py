"""Backing-directory resolution for config stores.

Resolution priority:
1. Explicit ``cwd`` (used verbatim, made absolute)
2. Injected ``resolver`` callable
3. Explicit ``project_name`` -> per-user app-data directory
4. Project name from the nearest ``pyproject.toml`` above ``search_from``
5. Name of the ``search_from`` directory itself
6. ``FALLBACK_PROJECT_NAME``

Every strategy after the first may fail with ``DotconfPathError`` (or, for an
injected resolver, any exception); failures are logged and the next strategy
is tried. The chain itself never raises.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .errors import DotconfPathError
from .project import infer_project_name
from .user import DEFAULT_PROJECT_SUFFIX, get_app_config_dir

logger = logging.getLogger(__name__)

FALLBACK_PROJECT_NAME = "dotconf"

DirectoryResolver = Callable[[Optional[str], Path], Union[str, Path]]


@dataclass(frozen=True)
class ResolvedDirectory:
    """Where a store keeps its file and which strategy chose it."""

    directory: Path
    strategy: str
    project_name: Optional[str] = None


def _non_empty(value: Optional[str]) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _from_search_dir(search_from: Path) -> str:
    name = _non_empty(search_from.absolute().name)
    if name is None:
        raise DotconfPathError(f"Cannot derive a project name from {search_from}")
    return name


def resolve_config_dir(
    *,
    cwd: Optional[Union[str, Path]] = None,
    project_name: Optional[str] = None,
    project_suffix: Optional[str] = DEFAULT_PROJECT_SUFFIX,
    search_from: Optional[Union[str, Path]] = None,
    resolver: Optional[DirectoryResolver] = None,
) -> ResolvedDirectory:
    """Resolve the directory a config file lives in. Never raises."""
    if cwd is not None and str(cwd) != "":
        directory = Path(cwd).expanduser().absolute()
        logger.debug("Using explicit cwd %s", directory)
        return ResolvedDirectory(directory, "cwd", _non_empty(project_name))

    start = Path(search_from) if search_from is not None else Path.cwd()
    explicit_name = _non_empty(project_name)

    if resolver is not None:
        try:
            directory = Path(resolver(explicit_name, start)).expanduser().absolute()
            logger.debug("Injected resolver chose %s", directory)
            return ResolvedDirectory(directory, "resolver", explicit_name)
        except Exception as exc:
            logger.warning("Directory resolver failed (%s); falling back", exc)

    strategies: list[tuple[str, Callable[[], str]]] = []
    if explicit_name is not None:
        strategies.append(("project_name", lambda: explicit_name))
    strategies.append(("manifest", lambda: infer_project_name(start)))
    strategies.append(("search_dir", lambda: _from_search_dir(start)))

    for strategy, name_fn in strategies:
        try:
            name = name_fn()
            directory = get_app_config_dir(name, project_suffix)
        except DotconfPathError as exc:
            logger.debug("Strategy %s unavailable: %s", strategy, exc)
            continue
        logger.debug("Strategy %s resolved %s", strategy, directory)
        return ResolvedDirectory(directory, strategy, name)

    directory = get_app_config_dir(FALLBACK_PROJECT_NAME, project_suffix)
    logger.debug("Falling back to %s", directory)
    return ResolvedDirectory(directory, "fallback", FALLBACK_PROJECT_NAME)


__all__ = [
    "FALLBACK_PROJECT_NAME",
    "DirectoryResolver",
    "ResolvedDirectory",
    "resolve_config_dir",
]
