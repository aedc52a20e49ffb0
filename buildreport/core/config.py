"""Configuration management for buildreport."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from buildreport.core.errors import ConfigurationError, InvalidPatternError
from buildreport.core.selection import ReportSelection, expand_part_names, split_part_names
from buildreport.matching import Filter
from buildreport.reports.data import ReportOptions
from buildreport.utils.constants import Constants
from buildreport.utils.helpers import read_structured_file


class ReportConfig(BaseModel):
    """Configuration for a build report."""

    parts: list[str] = Field(default_factory=list, description="Parts to show, in order")
    short_display: bool = Field(False, description="Leave out headings and prompts")
    show_checksum: bool = Field(False, description="Show module checksums")
    module_filters: dict[str, bool] = Field(
        default_factory=dict, description="Module path pattern -> must match"
    )
    setting_filters: dict[str, bool] = Field(
        default_factory=dict, description="Build-setting key pattern -> must match"
    )
    build_info: str | None = Field(None, description="JSON or YAML build-information file")
    verbose: bool = False
    debug: bool = False

    @field_validator("parts", mode="before")
    @classmethod
    def parse_parts(cls, v):
        """Parse comma-separated string or array, expanding aliases."""
        return expand_part_names(split_part_names(v))


def _filter_map(includes: list[str] | None, excludes: list[str] | None) -> dict[str, bool]:
    """Merge inclusion and exclusion patterns into a pattern -> polarity map.

    A pattern given as both an inclusion and an exclusion is an exclusion.
    """
    filters = {pattern: True for pattern in includes or []}
    filters.update({pattern: False for pattern in excludes or []})
    return filters


def _cli_parts(cli_args: Namespace) -> list[str]:
    parts = list(getattr(cli_args, "parts", None) or [])
    if getattr(cli_args, "version", False):
        parts.extend(Constants.DEFAULT_PARTS)
    return parts


def load_config(json_path: str | None, cli_args: Namespace, parser: ArgumentParser) -> ReportConfig:
    """Load JSON config, override with CLI args, return ReportConfig object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key, None)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value is not None and cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_config = read_structured_file(json_path) or {}
        if not isinstance(json_config, dict):
            logger.error(f"✗ Config file {json_path} must contain an object")
            raise ValueError(f"Invalid configuration in {json_path}: not an object")

    cli_parts = _cli_parts(cli_args)
    cli_module_filters = _filter_map(
        getattr(cli_args, "module_filter", None), getattr(cli_args, "module_exclude", None)
    )
    cli_setting_filters = _filter_map(
        getattr(cli_args, "setting_filter", None), getattr(cli_args, "setting_exclude", None)
    )

    config_dict = {
        "parts": cli_parts or json_config.get("parts", []),
        "short_display": get_value("short_display", False),
        "show_checksum": get_value("show_checksum", False),
        "module_filters": cli_module_filters or json_config.get("module_filters", {}),
        "setting_filters": cli_setting_filters or json_config.get("setting_filters", {}),
        "build_info": get_value("build_info", None),
        "verbose": getattr(cli_args, "verbose", False) or json_config.get("verbose", False),
        "debug": getattr(cli_args, "debug", False) or json_config.get("debug", False),
    }

    try:
        return ReportConfig.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e


def build_report_settings(config: ReportConfig) -> tuple[ReportSelection, ReportOptions]:
    """Compile the filters and build the selection for a report.

    Both filter maps are always compiled; errors from either are collected
    and raised together.

    Raises:
        ConfigurationError: If any filter pattern does not compile
    """
    module_filter, module_errors = Filter.from_patterns(config.module_filters)
    setting_filter, setting_errors = Filter.from_patterns(config.setting_filters)

    groups: dict[str, list[InvalidPatternError]] = {}
    if module_errors:
        groups[Constants.MODULE_FILTER_GROUP] = module_errors
    if setting_errors:
        groups[Constants.SETTING_FILTER_GROUP] = setting_errors
    if groups:
        for name, errors in groups.items():
            logger.error(f"✗ {name}:")
            for error in errors:
                logger.error(f"  {error}")
        raise ConfigurationError(groups)

    selection = ReportSelection(
        parts=config.parts,
        short_display=config.short_display,
        show_checksum=config.show_checksum,
    )
    options = ReportOptions(
        module_filter=module_filter,
        setting_filter=setting_filter,
        short_display=config.short_display,
        show_checksum=config.show_checksum,
    )
    return selection, options
