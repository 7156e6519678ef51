"""
Core Utilities Module.

This module provides logging setup and filesystem helpers used across the
application.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from wnquery.core.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def setup_logging(level: Union[str, int] = DEFAULT_LOG_LEVEL) -> None:
    """
    Configure the root logger for command-line use.

    The library itself only creates named loggers; applications decide where
    records go.

    Args:
        level: Logging level name or number; unknown names fall back to WARNING
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Returns a named logger instance."""
    return logging.getLogger(name)


def find_missing_file(directory: Union[str, Path], filenames: Iterable[str]) -> Optional[str]:
    """
    Return the path of the first file in `filenames` missing from `directory`.

    Args:
        directory: Directory to look in
        filenames: File names relative to the directory, checked in order

    Returns:
        The joined path of the first missing file, or None if all exist
    """
    for name in filenames:
        path = Path(directory) / name
        if not path.is_file():
            return str(path)
    return None
