"""Command-line interface for buildreport."""

from buildreport.cli.parser import add_report_arguments, create_parser

__all__ = ["add_report_arguments", "create_parser"]
