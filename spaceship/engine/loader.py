"""Part loading from plain-text parts files.

A parts file lists one part name per line. Lines are returned verbatim
in file order with the trailing newline removed; no content validation
is applied.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class LoadErrorType(Enum):
    """Classification of parts file errors."""

    FILE_NOT_FOUND = "file_not_found"
    FILE_UNREADABLE = "file_unreadable"


class PartsLoadError(Exception):
    """Raised when a parts file cannot be loaded."""

    def __init__(self, error_type: LoadErrorType, path: str, message: str):
        """Initialize load error.

        Args:
            error_type: Classification of the error
            path: Path that failed to load
            message: Human-readable error message
        """
        self.error_type = error_type
        self.path = path
        self.message = message
        super().__init__(message)


def load_parts(filepath: Union[str, Path]) -> List[str]:
    """Read a parts file into a list of part lines.

    Args:
        filepath: Path to the parts file

    Returns:
        One string per input line, in file order. Undecodable bytes are
        kept as surrogate escapes, so line.encode("utf-8", "surrogateescape")
        gives back the original bytes.

    Raises:
        PartsLoadError: FILE_NOT_FOUND if the path does not exist,
            FILE_UNREADABLE if it exists but cannot be opened for reading
    """
    path = Path(filepath)

    try:
        exists = path.exists()
        if exists:
            # Split on "\n" only; undecodable bytes survive as surrogates
            f = open(path, encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise PartsLoadError(
            LoadErrorType.FILE_UNREADABLE,
            str(filepath),
            f"file: '{filepath}' could not be opened!",
        ) from e

    if not exists:
        raise PartsLoadError(
            LoadErrorType.FILE_NOT_FOUND,
            str(filepath),
            f"file: '{filepath}' does not exist!",
        )

    with f:
        parts = [_strip_line_ending(line) for line in f]

    logger.info("Parts loaded from: %s", filepath)
    return parts


def _strip_line_ending(line: str) -> str:
    """Remove a trailing "\\n" or "\\r\\n", leaving any other "\\r" in place."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
