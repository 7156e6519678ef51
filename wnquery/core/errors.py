"""
Error types for the query layer.

Every error carries an ErrorKind tag plus structured fields, so callers and
tests can tell failures apart without comparing message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from wnquery.core.constants import ERROR_NOT_LOADED


class ErrorKind(str, Enum):
    """Categories of query-layer failures."""

    NOT_LOADED = "not_loaded"
    IO = "io"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    INVALID_POS = "invalid_pos"


class WordNetQueryError(Exception):
    """Base class for all query-layer errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotLoadedError(WordNetQueryError):
    """Raised when a query runs before a dictionary has been loaded."""

    kind = ErrorKind.NOT_LOADED

    def __init__(self) -> None:
        super().__init__(ERROR_NOT_LOADED)


class DictionaryIOError(WordNetQueryError):
    """A dictionary file could not be opened or read."""

    kind = ErrorKind.IO

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        message = f"can't open {path}" if path else "can't open dictionary"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DictionaryParseError(WordNetQueryError):
    """A dictionary file was readable but its contents were malformed."""

    kind = ErrorKind.PARSE

    def __init__(self, path: str, cause: Any) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"can't parse {path}: {cause}")


class NotFoundError(WordNetQueryError):
    """The engine has no record for the requested key."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, pos: Any, key: Any) -> None:
        self.pos = pos
        self.key = key
        code = int(pos) if isinstance(pos, int) else pos
        super().__init__(f"not found: pos={code} key={key}")


class InvalidPosError(WordNetQueryError):
    """A part-of-speech code outside the enumeration, under strict POS checking."""

    kind = ErrorKind.INVALID_POS

    def __init__(self, pos: Any) -> None:
        self.pos = pos
        super().__init__(f"invalid part of speech: {pos}")
