"""Main entry point for buildreport package."""

import sys
from typing import TextIO

from loguru import logger

from buildreport.cli import create_parser
from buildreport.core import (
    BuildInfoUnavailableError,
    ConfigurationError,
    UnknownPartError,
    build_report_settings,
    file_provider,
    load_config,
)
from buildreport.reports import resolve_parts, run_report
from buildreport.utils.constants import Constants
from buildreport.utils.logging import setup_logger


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit status: 0 after a report was written, 1 on failure
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args, parser)
    except (OSError, ValueError):
        return 1

    setup_logger(verbose=config.verbose, debug=config.debug)

    if not config.build_info:
        parser.error("--build-info is required (or set build_info in the config file)")

    try:
        selection, options = build_report_settings(config)
    except ConfigurationError:
        return 1

    # Nothing asked for: show the default report
    if not resolve_parts(selection.parts, options):
        selection = selection.model_copy(update={"parts": Constants.DEFAULT_PARTS})

    if config.verbose:
        logger.info(f"Build information: {config.build_info}")

    try:
        run_report(out or sys.stdout, selection, options, file_provider(config.build_info))
    except (BuildInfoUnavailableError, UnknownPartError) as e:
        logger.error(f"✗ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
