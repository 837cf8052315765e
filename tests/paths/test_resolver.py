from __future__ import annotations

from pathlib import Path

import pytest

from dotconf.core.utils.paths import (
    CONFIG_HOME_ENV,
    FALLBACK_PROJECT_NAME,
    DotconfPathError,
    app_dir_name,
    find_manifest,
    get_app_config_dir,
    infer_project_name,
    resolve_config_dir,
)


def _write_manifest(root: Path, body: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    manifest = root / "pyproject.toml"
    manifest.write_text(body, encoding="utf-8")
    return manifest


def test_cwd_is_used_verbatim(tmp_path: Path) -> None:
    resolved = resolve_config_dir(cwd=tmp_path / "here", project_name="ignored")
    assert resolved.directory == tmp_path / "here"
    assert resolved.strategy == "cwd"


def test_relative_cwd_is_made_absolute(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    resolved = resolve_config_dir(cwd="conf-fixture-cwd")
    assert resolved.directory == tmp_path / "conf-fixture-cwd"
    assert not resolved.directory.exists()


def test_project_name_uses_config_home(isolated_config_home: Path) -> None:
    resolved = resolve_config_dir(project_name="conf-fixture-project-name")
    assert resolved.directory == isolated_config_home / "conf-fixture-project-name-python"
    assert resolved.strategy == "project_name"


def test_empty_suffix_keeps_plain_name(isolated_config_home: Path) -> None:
    resolved = resolve_config_dir(project_name="app", project_suffix="")
    assert resolved.directory == isolated_config_home / "app"


def test_platform_dir_without_env(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_HOME_ENV, raising=False)
    directory = get_app_config_dir("conf-fixture")
    assert directory.is_absolute()
    assert "conf-fixture-python" in str(directory)


def test_blank_project_name_rejected() -> None:
    with pytest.raises(DotconfPathError):
        app_dir_name("   ")


def test_manifest_name_inferred_from_nested_dir(tmp_path: Path, isolated_config_home: Path) -> None:
    _write_manifest(tmp_path / "proj", '[project]\nname = "my-app"\n')
    nested = tmp_path / "proj" / "src" / "pkg"
    nested.mkdir(parents=True)

    assert find_manifest(nested) == tmp_path / "proj" / "pyproject.toml"
    assert infer_project_name(nested) == "my-app"

    resolved = resolve_config_dir(search_from=nested)
    assert resolved.strategy == "manifest"
    assert resolved.directory == isolated_config_home / "my-app-python"


def test_corrupt_manifest_falls_back_to_directory_name(tmp_path: Path, isolated_config_home: Path) -> None:
    _write_manifest(tmp_path / "broken-proj", "[project\nname = ")

    resolved = resolve_config_dir(search_from=tmp_path / "broken-proj")
    assert resolved.strategy == "search_dir"
    assert resolved.directory == isolated_config_home / "broken-proj-python"


def test_manifest_without_name_falls_back(tmp_path: Path) -> None:
    _write_manifest(tmp_path / "unnamed", "[tool.other]\nx = 1\n")
    with pytest.raises(DotconfPathError):
        infer_project_name(tmp_path / "unnamed")


def test_root_search_dir_uses_fallback_name(isolated_config_home: Path) -> None:
    resolved = resolve_config_dir(search_from=Path("/"))
    # A pyproject.toml at the filesystem root would be picked up first.
    if resolved.strategy == "fallback":
        assert resolved.directory == isolated_config_home / f"{FALLBACK_PROJECT_NAME}-python"
    else:
        assert resolved.strategy == "manifest"


def test_injected_resolver(tmp_path: Path) -> None:
    calls = []

    def resolver(project_name, search_from):
        calls.append((project_name, search_from))
        return tmp_path / "injected"

    resolved = resolve_config_dir(project_name="app", search_from=tmp_path, resolver=resolver)
    assert resolved.directory == tmp_path / "injected"
    assert resolved.strategy == "resolver"
    assert calls == [("app", tmp_path)]


def test_failing_resolver_falls_through(isolated_config_home: Path) -> None:
    def resolver(project_name, search_from):
        raise RuntimeError("boom")

    resolved = resolve_config_dir(project_name="app", resolver=resolver)
    assert resolved.strategy == "project_name"
    assert resolved.directory == isolated_config_home / "app-python"


def test_cwd_wins_over_resolver(tmp_path: Path) -> None:
    def resolver(project_name, search_from):  # pragma: no cover - must not run
        raise AssertionError("resolver should not be consulted")

    resolved = resolve_config_dir(cwd=tmp_path, resolver=resolver)
    assert resolved.directory == tmp_path
