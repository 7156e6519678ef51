"""
Abstract dictionary engine contract.

The query layer talks to the loaded lexical database only through this
interface. Part-of-speech codes arrive unvalidated; an engine answers an
unrecognized code with an empty result rather than an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from wnquery.core.models import SenseEntry, Synset


class DictionaryEngine(ABC):
    """Abstract interface for a loaded, read-only lexical database."""

    @classmethod
    @abstractmethod
    def open(cls, directory: Union[str, Path]) -> "DictionaryEngine":
        """Open and parse the dictionary stored in `directory`.

        Raises:
            DictionaryIOError: a required file is missing or unreadable
            DictionaryParseError: a file is readable but malformed
        """

    @abstractmethod
    def initialize_morphology(self, directory: Union[str, Path]) -> None:
        """Prepare morphological data from the same dictionary directory.

        Raises:
            DictionaryIOError: an exception list is missing or unreadable
        """

    @abstractmethod
    def lookup_senses(self, lemma: str, pos: int) -> List[SenseEntry]:
        """Return the sense entries of an exact lemma under one POS, in sense order."""

    @abstractmethod
    def reduce_word(self, word: str, pos: int) -> str:
        """Return the base form of `word` under `pos`, or "" if there is none."""

    @abstractmethod
    def get_synset(self, pos: int, offset: int) -> Synset:
        """Return the synset at `offset` for `pos`.

        Raises:
            NotFoundError: no synset exists there
        """
