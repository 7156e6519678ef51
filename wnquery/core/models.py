"""
Core domain models for the query layer.

Defines typed structures for synsets, sense entries and index entries as the
engine reports them, the response envelopes, and the service configuration.
"""

from __future__ import annotations

import os
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from wnquery.core.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_DICTIONARY_DIR,
    ENV_LOG_LEVEL,
    ENV_STRICT_POS,
)
from wnquery.core.lexical import PartOfSpeech


class ServiceConfig(BaseModel):
    """Configuration for the query service."""

    dictionary_dir: Optional[str] = None
    strict_pos: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        strict = os.environ.get(ENV_STRICT_POS, "").strip().lower()
        return cls(
            dictionary_dir=os.environ.get(ENV_DICTIONARY_DIR) or None,
            strict_pos=strict in ("1", "true", "yes", "on"),
            log_level=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        )


class Synset(BaseModel):
    """A set of synonymous senses, identified by part of speech and offset."""

    pos: PartOfSpeech
    offset: int
    lex_name: str = ""
    words: List[str] = Field(default_factory=list)
    definition: str = ""
    examples: List[str] = Field(default_factory=list)


class SenseEntry(BaseModel):
    """One sense of a lemma under a part of speech.

    The linked synset is kept on the entry for aggregation but left out of
    serialized output, which carries the offset instead.
    """

    lemma: str
    pos: PartOfSpeech
    sense_number: int
    synset_offset: int
    sense_key: str = ""
    synset: Optional[Synset] = Field(default=None, exclude=True)


class IndexEntry(BaseModel):
    """The index view of a lemma: its synset offsets under one part of speech."""

    lemma: str
    pos: PartOfSpeech
    synset_offsets: List[int] = Field(default_factory=list)

    @property
    def synset_count(self) -> int:
        return len(self.synset_offsets)


class ErrorResponse(BaseModel):
    """Error-shaped envelope. An empty string means nothing went wrong."""

    error: str = ""


class DataResponse(BaseModel):
    """Data-shaped envelope."""

    data: Any = None
