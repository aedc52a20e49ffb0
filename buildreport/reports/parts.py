"""Renderers for the individual report parts.

Every renderer takes the output stream, the build-information record and
the report options. In short display mode headings, prompts and column
headers are left out so that the bare values can be used directly.
"""

from collections.abc import Callable
from typing import TextIO

from buildreport.core.types import BuildInfo, Module
from buildreport.reports.columns import compute_module_columns
from buildreport.reports.data import ReportOptions
from buildreport.reports.helpers import (
    format_row,
    header_widths,
    write_heading,
    write_prompted_line,
)
from buildreport.utils.constants import Constants

PartRenderer = Callable[[TextIO, BuildInfo, ReportOptions], None]


def render_toolchain_version(f: TextIO, info: BuildInfo, options: ReportOptions) -> None:
    """Show the toolchain version used to build the executable."""
    write_prompted_line(f, "Toolchain Version: ", info.toolchain_version, options.short_display)


def render_path(f: TextIO, info: BuildInfo, options: ReportOptions) -> None:
    """Show the import path of the executable."""
    write_prompted_line(f, "Path: ", info.path, options.short_display)


def render_main_module(f: TextIO, info: BuildInfo, options: ReportOptions) -> None:
    """Show the version, and optionally the checksum, of the main module."""
    main = info.main_module
    if options.show_checksum and main.checksum:
        write_prompted_line(
            f, "Version, Checksum: ", f"{main.version} {main.checksum}", options.short_display
        )
    else:
        write_prompted_line(f, "Version: ", main.version, options.short_display)


def _module_cells(module_type: str, module: Module, path: str, show_checksum: bool) -> list[str]:
    cells = [module_type, path, module.version]
    if show_checksum:
        cells.append(module.checksum)
    return cells


def render_modules(f: TextIO, info: BuildInfo, options: ReportOptions) -> None:
    """Show the main module and the dependencies that pass the module filter.

    A replaced dependency is tagged ``r`` and followed by its replacement,
    tagged ``D`` with its path indented.
    """
    short = options.short_display
    write_heading(f, "Modules:", short)

    columns = compute_module_columns(info.main_module, info.dependencies, options.show_checksum)
    headers = ("Type", *columns.headers)
    widths = header_widths((1, *columns.widths), headers, not short)

    if not short:
        f.write(format_row(headers, widths) + "\n")

    def write_row(module_type: str, module: Module, path: str) -> None:
        cells = _module_cells(module_type, module, path, options.show_checksum)
        f.write(format_row(cells, widths) + "\n")

    main = info.main_module
    if options.module_filter.passes(main.path):
        write_row(Constants.MODULE_TYPE_MAIN, main, main.path)

    for dep in info.dependencies:
        if not options.module_filter.passes(dep.path):
            continue

        repl = dep.replacement
        if repl is None:
            write_row(Constants.MODULE_TYPE_DEPENDENCY, dep, dep.path)
            continue

        write_row(Constants.MODULE_TYPE_REPLACED, dep, dep.path)
        write_row(Constants.MODULE_TYPE_DEPENDENCY, repl, Constants.REPLACEMENT_INDENT + repl.path)


def render_build_settings(f: TextIO, info: BuildInfo, options: ReportOptions) -> None:
    """Show the build settings whose keys pass the build-setting filter."""
    short = options.short_display
    write_heading(f, "Build Settings:", short)

    settings = [s for s in info.settings if options.setting_filter.passes(s.key)]
    max_key = max((len(s.key) for s in settings), default=0)

    headers = ("Key", "Value")
    widths = header_widths((max_key, 0), headers, not short)
    # Keys are right-justified except in short form
    right_justified = () if short else (0,)

    if not short:
        f.write(format_row(headers, widths, right_justified) + "\n")

    for setting in settings:
        f.write(format_row((setting.key, setting.value), widths, right_justified) + "\n")


def render_raw(
    f: TextIO, info: BuildInfo, options: ReportOptions  # pylint: disable=unused-argument
) -> None:
    """Show the whole record in its raw form, ignoring filters and display modes."""
    f.write(str(info))


PART_RENDERERS: dict[str, PartRenderer] = {
    Constants.PART_TOOLCHAIN_VERSION: render_toolchain_version,
    Constants.PART_PATH: render_path,
    Constants.PART_MAIN_MODULE: render_main_module,
    Constants.PART_MODULES: render_modules,
    Constants.PART_BUILD_SETTINGS: render_build_settings,
    Constants.PART_RAW: render_raw,
}
