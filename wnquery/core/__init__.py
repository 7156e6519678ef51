"""
Core Package.

This package provides the shared vocabulary, models and errors for the wnquery package.
"""

from wnquery.core.errors import (
    DictionaryIOError,
    DictionaryParseError,
    ErrorKind,
    InvalidPosError,
    NotFoundError,
    NotLoadedError,
    WordNetQueryError,
)
from wnquery.core.lexical import ALL_POS, PartOfSpeech, coerce_pos, fan_out, parse_pos
from wnquery.core.models import (
    DataResponse,
    ErrorResponse,
    IndexEntry,
    SenseEntry,
    ServiceConfig,
    Synset,
)
from wnquery.core.utils import get_logger, setup_logging

__all__ = [
    # Lexical vocabulary
    "PartOfSpeech",
    "ALL_POS",
    "coerce_pos",
    "parse_pos",
    "fan_out",
    # Models
    "Synset",
    "SenseEntry",
    "IndexEntry",
    "ErrorResponse",
    "DataResponse",
    "ServiceConfig",
    # Errors
    "ErrorKind",
    "WordNetQueryError",
    "NotLoadedError",
    "DictionaryIOError",
    "DictionaryParseError",
    "NotFoundError",
    "InvalidPosError",
    # Utilities
    "setup_logging",
    "get_logger",
]
