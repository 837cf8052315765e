"""Path utilities for dotconf.

This package resolves where a config file lives:
- Resolver: ordered strategy chain ending in a guaranteed fallback
- Project: project name discovery from ``pyproject.toml``
- User: per-user application-data directories
"""
from __future__ import annotations

from .errors import DotconfPathError
from .project import (
    MANIFEST_NAME,
    find_manifest,
    infer_project_name,
    read_project_name,
)
from .resolver import (
    FALLBACK_PROJECT_NAME,
    DirectoryResolver,
    ResolvedDirectory,
    resolve_config_dir,
)
from .user import (
    CONFIG_HOME_ENV,
    DEFAULT_PROJECT_SUFFIX,
    app_dir_name,
    get_app_config_dir,
)

__all__ = [
    # errors
    "DotconfPathError",
    # resolver
    "FALLBACK_PROJECT_NAME",
    "DirectoryResolver",
    "ResolvedDirectory",
    "resolve_config_dir",
    # project
    "MANIFEST_NAME",
    "find_manifest",
    "infer_project_name",
    "read_project_name",
    # user
    "CONFIG_HOME_ENV",
    "DEFAULT_PROJECT_SUFFIX",
    "app_dir_name",
    "get_app_config_dir",
]
