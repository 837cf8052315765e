from __future__ import annotations

import json
from pathlib import Path

import pytest

from dotconf.core.exceptions import InvalidArgumentError
from dotconf.core.storage import STORAGE_BACKENDS, JsonStorage, YamlStorage


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    assert JsonStorage(tmp_path / "config.json").load() == {}
    assert YamlStorage(tmp_path / "config.yaml").load() == {}


def test_load_missing_directory_is_empty(tmp_path: Path) -> None:
    assert JsonStorage(tmp_path / "gone" / "config.json").load() == {}


@pytest.mark.parametrize("content", ["{not valid json}", "", "[1, 2, 3]", '"scalar"', "null"])
def test_load_bad_json_is_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    assert JsonStorage(path).load() == {}


def test_load_undecodable_bytes_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert JsonStorage(path).load() == {}


@pytest.mark.parametrize("content", ["key: [unclosed", "- a\n- b\n", "just text"])
def test_load_bad_yaml_is_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    assert YamlStorage(path).load() == {}


def test_load_directory_in_place_of_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.mkdir()
    assert JsonStorage(path).load() == {}


def test_save_creates_directory_and_pretty_prints(tmp_path: Path) -> None:
    path = tmp_path / "lazy" / "config.json"
    storage = JsonStorage(path)
    assert storage.save({"b": 1, "a": {"c": "🦄"}}) is True

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"b": 1, "a": {"c": "🦄"}}
    assert text.index('"b"') < text.index('"a"')
    assert "🦄" in text
    assert storage.load() == {"b": 1, "a": {"c": "🦄"}}


def test_yaml_save_and_load(tmp_path: Path) -> None:
    storage = YamlStorage(tmp_path / "config.yaml")
    storage.save({"window": {"width": 800}, "name": "🦄"})
    assert storage.load() == {"window": {"width": 800}, "name": "🦄"}


def test_unserializable_value_is_invalid_argument(tmp_path: Path) -> None:
    storage = JsonStorage(tmp_path / "config.json")
    with pytest.raises(InvalidArgumentError):
        storage.save({"bad": object()})
    assert not storage.path.exists()


def test_yaml_unserializable_value_is_invalid_argument(tmp_path: Path) -> None:
    storage = YamlStorage(tmp_path / "config.yaml")
    with pytest.raises(InvalidArgumentError):
        storage.save({"bad": object()})


def test_save_io_failure_is_logged_not_raised(tmp_path: Path, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    storage = JsonStorage(blocker / "config.json")

    assert storage.save({"a": 1}) is False
    assert "Failed to save config" in caplog.text


def test_backends_registry() -> None:
    assert STORAGE_BACKENDS["json"] is JsonStorage
    assert STORAGE_BACKENDS["yaml"] is YamlStorage
    assert JsonStorage.extension == "json"
    assert YamlStorage.extension == "yaml"
