"""Build-information providers.

A provider is a callable taking no arguments and returning the record
together with a success flag. A provider that cannot supply the record
returns ``(None, False)``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from buildreport.core.types import BuildInfo
from buildreport.utils.helpers import read_structured_file

BuildInfoProvider = Callable[[], tuple[BuildInfo | None, bool]]


def load_build_info(file_path: str | Path) -> BuildInfo:
    """Load a build-information record from a JSON or YAML file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a valid build-information record
    """
    data = read_structured_file(file_path)
    try:
        return BuildInfo.model_validate(data)
    except ValidationError as e:
        logger.error(f"✗ Invalid build information in {file_path}: {e}")
        raise


def static_provider(build_info: BuildInfo | None) -> BuildInfoProvider:
    """Return a provider that always supplies the given record.

    Passing None gives a provider that always reports unavailability.
    """

    def provide() -> tuple[BuildInfo | None, bool]:
        return build_info, build_info is not None

    return provide


def file_provider(file_path: str | Path) -> BuildInfoProvider:
    """Return a provider that reads the record from a file when called."""

    def provide() -> tuple[BuildInfo | None, bool]:
        try:
            return load_build_info(file_path), True
        except (OSError, ValueError) as e:
            logger.debug(f"Build information unavailable from {file_path}: {e}")
            return None, False

    return provide
