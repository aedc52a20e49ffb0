"""Command-line interface for buildreport."""

import argparse

from buildreport.utils.constants import Constants


def _part_help() -> str:
    lines = [f"{name}: {text}" for name, text in Constants.PART_DESCRIPTIONS.items()]
    aliases = ", ".join(
        f"{alias}={'+'.join(parts)}" for alias, parts in Constants.PART_ALIASES.items()
    )
    return (
        "Show only the named parts of the report (repeatable, comma-separated lists allowed). "
        + "; ".join(lines)
        + f". Aliases: {aliases}"
    )


def add_report_arguments(
    parser: argparse.ArgumentParser, version_flag: str = "--version"
) -> argparse.ArgumentParser:
    """Attach the report selection and filter flags to a parser.

    Other programs can call this on their own parser to offer the build
    report alongside their own options. A parser that already has a
    '--version' option (e.g. argparse's own version action) must pass a
    different ``version_flag``; the parsed value is always stored as
    ``version``.

    Args:
        parser: The parser to extend
        version_flag: Option string for the full default report

    Returns:
        The same parser
    """
    group = parser.add_argument_group("build report")
    group.add_argument(
        version_flag,
        dest="version",
        action="store_true",
        help="Show the complete version details in the default format",
    )
    group.add_argument(
        "-p",
        "--part",
        dest="parts",
        action="append",
        metavar="PART",
        help=_part_help(),
    )
    group.add_argument(
        "-s",
        "--short",
        dest="short_display",
        action="store_true",
        help="Show the parts in simplified form, without headings and prompts. "
        f"There is no short form of the '{Constants.PART_RAW}' part.",
    )
    group.add_argument(
        "--show-checksum",
        action="store_true",
        help="Show module checksums",
    )

    filters = parser.add_argument_group("report filters")
    filters.add_argument(
        "--module-filter",
        action="append",
        metavar="RE",
        help="Only show modules whose path matches RE (repeatable; implies --part modules)",
    )
    filters.add_argument(
        "--module-exclude",
        action="append",
        metavar="RE",
        help="Hide modules whose path matches RE (repeatable; implies --part modules)",
    )
    filters.add_argument(
        "--setting-filter",
        action="append",
        metavar="RE",
        help="Only show build settings whose key matches RE "
        "(repeatable; implies --part build-settings)",
    )
    filters.add_argument(
        "--setting-exclude",
        action="append",
        metavar="RE",
        help="Hide build settings whose key matches RE "
        "(repeatable; implies --part build-settings)",
    )
    return parser


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildreport",
        description="Show the build information of a program",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report in the default format
  %(prog)s -b build-info.json --version

  # Just the main module version, for use in scripts
  %(prog)s -b build-info.json --short

  # Modules from one organisation, with checksums
  %(prog)s -b build-info.yaml --module-filter '^example.com/' --show-checksum

  # Using JSON config
  %(prog)s --config report.json

Example report.json:
{
  "build_info": "build-info.json",
  "parts": ["main-module", "modules"],
  "show_checksum": true,
  "module_filters": {"^example.com/": true, "/internal/": false},
  "setting_filters": {"^GO": true}
}
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "-b",
        "--build-info",
        type=str,
        help="JSON or YAML file holding the build information",
    )

    add_report_arguments(parser)

    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
