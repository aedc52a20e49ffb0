"""Integration tests for the command-line entry point."""

from io import StringIO
import json
from pathlib import Path

import pytest

from buildreport.__main__ import main

# pylint: disable=missing-function-docstring

RECORD = {
    "path": "example.com/app/cmd/app",
    "toolchain_version": "go1.22.1",
    "main_module": {"path": "example.com/app", "version": "v1.0.0", "checksum": "h1:app="},
    "dependencies": [
        {"path": "example.com/util", "version": "v0.2.0", "checksum": "h1:util="},
        {"path": "other.org/lib", "version": "v0.1.0", "checksum": "h1:lib="},
    ],
    "settings": [
        {"key": "CGO_ENABLED", "value": "0"},
        {"key": "GOOS", "value": "linux"},
    ],
}


@pytest.fixture(name="build_file")
def fixture_build_file(tmp_path: Path) -> Path:
    path = tmp_path / "build.json"
    path.write_text(json.dumps(RECORD), encoding="utf-8")
    return path


def _main(argv: list[str]) -> tuple[int, str]:
    out = StringIO()
    status = main(argv, out=out)
    return status, out.getvalue()


class TestCliSuccess:
    """Successful reports exit with status 0."""

    def test_short_main_module(self, build_file: Path) -> None:
        assert _main(["-b", str(build_file), "-s"]) == (0, "v1.0.0\n")

    def test_short_main_module_with_checksum(self, build_file: Path) -> None:
        assert _main(["-b", str(build_file), "-s", "--show-checksum"]) == (0, "v1.0.0 h1:app=\n")

    def test_version_flag_shows_default_parts(self, build_file: Path) -> None:
        _, output = _main(["-b", str(build_file), "--version"])
        headings = [line for line in output.splitlines() if line.endswith(":")]
        assert headings == ["Modules:", "Build Settings:"]

    def test_no_parts_shows_default_report(self, build_file: Path) -> None:
        _, output = _main(["-b", str(build_file)])
        assert output.startswith("Toolchain Version: go1.22.1\nPath: example.com/app/cmd/app\n")

    def test_module_filter_implies_modules(self, build_file: Path) -> None:
        _, output = _main(
            ["-b", str(build_file), "-s", "--module-filter", "^example.com/", "--module-exclude", "util"]
        )
        assert output == "M example.com/app  v1.0.0\n"

    def test_config_file(self, build_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "report.json"
        config.write_text(
            json.dumps(
                {
                    "build_info": str(build_file),
                    "parts": ["path"],
                    "short_display": True,
                    "setting_filters": {"^CGO": True},
                }
            ),
            encoding="utf-8",
        )
        assert _main(["-c", str(config)]) == (0, "example.com/app/cmd/app\nCGO_ENABLED 0\n")


class TestCliFailure:
    """Failures exit with status 1."""

    def test_missing_build_info_file(self, tmp_path: Path) -> None:
        assert _main(["-b", str(tmp_path / "missing.json"), "--version"]) == (1, "")

    def test_bad_module_filter(self, build_file: Path) -> None:
        assert _main(["-b", str(build_file), "--module-filter", "("]) == (1, "")

    def test_unknown_part(self, build_file: Path) -> None:
        assert _main(["-b", str(build_file), "-p", "bogus-part"]) == (1, "")

    def test_unknown_part_keeps_earlier_output(self, build_file: Path) -> None:
        assert _main(["-b", str(build_file), "-s", "-p", "path,bogus"]) == (
            1,
            "example.com/app/cmd/app\n",
        )

    def test_missing_config_file(self, tmp_path: Path) -> None:
        assert _main(["-c", str(tmp_path / "missing.json")]) == (1, "")

    def test_build_info_required(self) -> None:
        with pytest.raises(SystemExit):
            _main(["--version"])
