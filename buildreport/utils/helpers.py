"""Shared utility functions for buildreport."""

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger
import yaml


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_structured_file(file_path: str | Path) -> Any:
    """Read a JSON or YAML document, chosen by file extension.

    Files ending in ``.yml`` or ``.yaml`` are parsed as YAML, everything
    else as JSON.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
        ValueError: If the content cannot be parsed
    """
    path = Path(expand_file_path(str(file_path)) or file_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yml", ".yaml"):
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"✗ File not found: {path}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {path}")
        logger.error("  Please check file permissions and try again")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"✗ Invalid JSON in {path}: {e}")
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        logger.error(f"✗ Invalid YAML in {path}: {e}")
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {path}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
