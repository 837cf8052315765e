import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'dotconf'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dotconf import ConfigStore  # noqa: E402
from dotconf.core.utils.paths import CONFIG_HOME_ENV  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Redirect per-user app-data directories into the test's tmp dir."""
    home = tmp_path / "config-home"
    monkeypatch.setenv(CONFIG_HOME_ENV, str(home))
    return home


@pytest.fixture
def store_dir(tmp_path) -> Path:
    return tmp_path / "store"


@pytest.fixture
def conf(store_dir) -> ConfigStore:
    """Fresh JSON-backed store in a temp directory."""
    return ConfigStore(cwd=store_dir)
