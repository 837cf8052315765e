"""Per-user application-data directory resolution.

Precedence (highest to lowest):
1. Environment variable: DOTCONF_CONFIG_HOME (base directory)
2. Platform convention via ``platformdirs.user_config_dir``

The application directory is named ``<project_name>-<suffix>`` so that
settings of the Python flavour of an application do not collide with other
runtimes using the same project name. An empty suffix leaves the name as is.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

from .errors import DotconfPathError

CONFIG_HOME_ENV = "DOTCONF_CONFIG_HOME"
DEFAULT_PROJECT_SUFFIX = "python"


def app_dir_name(project_name: str, suffix: str | None = DEFAULT_PROJECT_SUFFIX) -> str:
    name = project_name.strip()
    if not name:
        raise DotconfPathError("Project name must be a non-empty string")
    if suffix:
        return f"{name}-{suffix}"
    return name


def get_app_config_dir(project_name: str, suffix: str | None = DEFAULT_PROJECT_SUFFIX) -> Path:
    """Return the absolute per-user config directory for ``project_name``.

    The directory is not created here; writers create it on first save.
    """
    name = app_dir_name(project_name, suffix)

    env_override = os.environ.get(CONFIG_HOME_ENV)
    if isinstance(env_override, str) and env_override.strip():
        base = Path(env_override.strip()).expanduser()
        return (base / name).absolute()

    return Path(user_config_dir(name, appauthor=False)).absolute()


__all__ = [
    "CONFIG_HOME_ENV",
    "DEFAULT_PROJECT_SUFFIX",
    "app_dir_name",
    "get_app_config_dir",
]
