"""Unit tests for attaching report flags to a parser."""

import argparse

from buildreport.cli import add_report_arguments, create_parser

# pylint: disable=missing-function-docstring


def _host_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="host")
    parser.add_argument("--version", action="version", version="host 1.0")
    return parser


class TestAddReportArguments:
    """Report flags can be added to another program's parser."""

    def test_default_version_flag(self) -> None:
        assert create_parser().parse_args(["--version"]).version is True

    def test_custom_version_flag_beside_host_version(self) -> None:
        parser = add_report_arguments(_host_parser(), version_flag="--build-version")
        assert parser.parse_args(["--build-version"]).version is True

    def test_custom_version_flag_defaults_to_false(self) -> None:
        parser = add_report_arguments(_host_parser(), version_flag="--build-version")
        assert parser.parse_args([]).version is False

    def test_report_flags_available_on_host(self) -> None:
        parser = add_report_arguments(_host_parser(), version_flag="--build-version")
        args = parser.parse_args(["-p", "mods", "--module-filter", "^x"])
        assert (args.parts, args.module_filter) == (["mods"], ["^x"])
