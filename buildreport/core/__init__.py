"""Core domain logic for buildreport."""

from .errors import (
    BuildInfoUnavailableError,
    BuildReportError,
    ConfigurationError,
    InvalidPatternError,
    UnknownPartError,
)
from .types import BuildInfo, BuildSetting, Module
from .selection import ReportSelection, expand_part_names, split_part_names
from .provider import BuildInfoProvider, file_provider, load_build_info, static_provider
from .config import ReportConfig, build_report_settings, load_config

__all__ = [
    "BuildInfo",
    "BuildInfoProvider",
    "BuildInfoUnavailableError",
    "BuildReportError",
    "BuildSetting",
    "ConfigurationError",
    "InvalidPatternError",
    "Module",
    "ReportConfig",
    "ReportSelection",
    "UnknownPartError",
    "build_report_settings",
    "expand_part_names",
    "file_provider",
    "load_build_info",
    "load_config",
    "split_part_names",
    "static_provider",
]
