"""Helper functions for report rendering."""

from collections.abc import Collection, Sequence
from typing import TextIO

from buildreport.utils.constants import Constants


def write_prompted_line(f: TextIO, prompt: str, value: str, short_display: bool) -> None:
    """Write a single value line, prefixed by its prompt unless in short form."""
    if short_display:
        f.write(f"{value}\n")
    else:
        f.write(f"{prompt}{value}\n")


def write_heading(f: TextIO, title: str, short_display: bool) -> None:
    """Write a section heading; nothing is written in short form."""
    if not short_display:
        f.write(f"{title}\n")


def format_row(
    cells: Sequence[str],
    widths: Sequence[int],
    right_justified: Collection[int] = (),
) -> str:
    """Format one table row.

    Cells are padded to their column width and joined by the column
    separator. The last cell is not padded unless it is right-justified,
    and trailing whitespace left by empty cells is removed.

    Args:
        cells: Cell text, one per column
        widths: Column widths, one per column
        right_justified: Indexes of the columns to right-justify

    Returns:
        The formatted row, without a line terminator
    """
    last = len(cells) - 1
    formatted = []
    for i, (cell, width) in enumerate(zip(cells, widths)):
        if i in right_justified:
            formatted.append(f"{cell:>{width}}")
        elif i == last:
            formatted.append(cell)
        else:
            formatted.append(f"{cell:<{width}}")
    return Constants.COLUMN_SEPARATOR.join(formatted).rstrip()


def header_widths(widths: Sequence[int], headers: Sequence[str], show_header: bool) -> list[int]:
    """Widen columns to fit their header text when headers are shown."""
    if not show_header:
        return list(widths)
    return [max(width, len(header)) for width, header in zip(widths, headers)]
