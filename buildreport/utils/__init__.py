"""Utility functions for buildreport."""

from buildreport.utils.constants import Constants
from buildreport.utils.helpers import expand_file_path, read_structured_file
from buildreport.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "read_structured_file",
    "setup_logger",
]
