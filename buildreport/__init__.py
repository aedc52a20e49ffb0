"""buildreport - filtered build-information reports.

Render the build information of a program (toolchain version, path, main
module, dependencies and build settings) as aligned text, optionally
filtered by regular expressions.
"""

from buildreport.core import (
    BuildInfo,
    BuildInfoUnavailableError,
    BuildReportError,
    BuildSetting,
    ConfigurationError,
    InvalidPatternError,
    Module,
    ReportConfig,
    ReportSelection,
    UnknownPartError,
    build_report_settings,
    file_provider,
    load_build_info,
    load_config,
    static_provider,
)
from buildreport.matching import Filter
from buildreport.reports import ReportOptions, resolve_parts, run_report
from buildreport.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "BuildInfo",
    "BuildInfoUnavailableError",
    "BuildReportError",
    "BuildSetting",
    "ConfigurationError",
    "Filter",
    "InvalidPatternError",
    "Module",
    "ReportConfig",
    "ReportOptions",
    "ReportSelection",
    "UnknownPartError",
    "build_report_settings",
    "file_provider",
    "load_build_info",
    "load_config",
    "resolve_parts",
    "run_report",
    "setup_logger",
    "static_provider",
]
