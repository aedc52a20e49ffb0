"""Logging configuration for buildreport using loguru."""

import sys

from loguru import logger


def _level_for(verbose: bool, debug: bool) -> str:
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru logger based on verbose and debug flags.

    Log messages always go to stderr so they never mix with the report,
    which is written to stdout.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    logger.remove()

    # For DEBUG: detailed format with timestamp and location
    if debug:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
    else:
        format_str = "<level>{message}</level>"

    logger.add(
        sys.stderr,
        format=format_str,
        level=_level_for(verbose, debug),
        colorize=True,
    )
