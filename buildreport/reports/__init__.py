"""Build report rendering."""

from .columns import ModuleColumns, compute_module_columns
from .core import resolve_parts, run_report
from .data import ReportOptions
from .parts import PART_RENDERERS

__all__ = [
    "ModuleColumns",
    "PART_RENDERERS",
    "ReportOptions",
    "compute_module_columns",
    "resolve_parts",
    "run_report",
]
