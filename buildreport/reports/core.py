"""Report orchestration: resolve the selection, fetch the record, render."""

from collections.abc import Sequence
from dataclasses import replace
from typing import TextIO

from loguru import logger

from buildreport.core.errors import BuildInfoUnavailableError, UnknownPartError
from buildreport.core.provider import BuildInfoProvider
from buildreport.core.selection import ReportSelection
from buildreport.reports.data import ReportOptions
from buildreport.reports.parts import PART_RENDERERS
from buildreport.utils.constants import Constants


def resolve_parts(parts: Sequence[str], options: ReportOptions) -> list[str]:
    """Work out which parts to show.

    Active filters pull in the part they apply to, and short display with
    nothing else requested shows the main module. Requested parts are never
    removed.

    Args:
        parts: The parts the caller asked for, in order
        options: Filters and display modes

    Returns:
        The parts to show, in order
    """
    resolved = list(parts)

    if options.module_filter.has_filters() and Constants.PART_MODULES not in resolved:
        resolved.append(Constants.PART_MODULES)
    if options.setting_filter.has_filters() and Constants.PART_BUILD_SETTINGS not in resolved:
        resolved.append(Constants.PART_BUILD_SETTINGS)
    if options.short_display and not resolved:
        resolved.append(Constants.PART_MAIN_MODULE)

    return resolved


def run_report(
    f: TextIO,
    selection: ReportSelection,
    options: ReportOptions,
    provider: BuildInfoProvider,
) -> bool:
    """Write the selected parts of the build report.

    Each part is written at most once, at the position of its first
    occurrence. Parts written before an unknown part is reached stay in
    the output.

    Args:
        f: Output stream
        selection: Requested parts and display modes
        options: Filters; its display modes are replaced by the selection's
        provider: Source of the build-information record

    Returns:
        True if a report was written, False if no part was requested

    Raises:
        BuildInfoUnavailableError: If the provider cannot supply the record
        UnknownPartError: If a requested part is not a known part
    """
    options = replace(
        options,
        short_display=selection.short_display,
        show_checksum=selection.show_checksum,
    )
    parts = resolve_parts(selection.parts, options)
    if not parts:
        logger.debug("No report parts requested")
        return False
    logger.info(f"Report parts: {', '.join(parts)}")

    info, ok = provider()
    if not ok or info is None:
        raise BuildInfoUnavailableError()

    shown: set[str] = set()
    for part in parts:
        if part in shown:
            continue
        shown.add(part)

        renderer = PART_RENDERERS.get(part)
        if renderer is None:
            raise UnknownPartError(part)

        logger.debug(f"Rendering part: {part}")
        renderer(f, info, options)

    return True
