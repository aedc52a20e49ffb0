"""Unit tests for build-information providers."""

import json
from pathlib import Path

import pytest

from buildreport.core import BuildInfo, Module, file_provider, load_build_info, static_provider

# pylint: disable=missing-function-docstring

RECORD = {
    "path": "example.com/app",
    "toolchain_version": "go1.22.1",
    "main_module": {"path": "example.com/app", "version": "v1.0.0"},
    "dependencies": [
        {
            "path": "other.org/lib",
            "version": "v0.1.0",
            "replacement": {"path": "fork.org/lib", "version": "v0.1.1"},
        }
    ],
    "settings": [{"key": "GOOS", "value": "linux"}],
}

YAML_RECORD = """\
path: example.com/app
toolchain_version: go1.22.1
main_module:
  path: example.com/app
  version: v1.0.0
dependencies:
  - path: other.org/lib
    version: v0.1.0
settings:
  - key: GOOS
    value: linux
"""


class TestStaticProvider:
    """Static providers hand back a fixed record."""

    def test_supplies_record(self) -> None:
        info = BuildInfo(path="x")
        assert static_provider(info)() == (info, True)

    def test_none_is_unavailable(self) -> None:
        assert static_provider(None)() == (None, False)


class TestLoadBuildInfo:
    """Records load from JSON or YAML files."""

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "build.json"
        path.write_text(json.dumps(RECORD), encoding="utf-8")
        info = load_build_info(path)
        assert info.dependencies[0].replacement == Module(path="fork.org/lib", version="v0.1.1")

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "build.yaml"
        path.write_text(YAML_RECORD, encoding="utf-8")
        assert load_build_info(path).settings[0].value == "linux"

    def test_invalid_record_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "build.json"
        path.write_text(json.dumps({"dependencies": "not-a-list"}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_build_info(path)

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "build.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_build_info(path)


class TestFileProvider:
    """File providers report unavailability instead of raising."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "build.json"
        path.write_text(json.dumps(RECORD), encoding="utf-8")
        info, ok = file_provider(path)()
        assert (info.path, ok) == ("example.com/app", True)

    def test_missing_file_is_unavailable(self, tmp_path: Path) -> None:
        assert file_provider(tmp_path / "missing.json")() == (None, False)

    def test_bad_file_is_unavailable(self, tmp_path: Path) -> None:
        path = tmp_path / "build.json"
        path.write_text("[]", encoding="utf-8")
        assert file_provider(path)() == (None, False)
