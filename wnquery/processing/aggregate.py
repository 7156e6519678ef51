"""
Lemma lookups aggregated across parts of speech.

Lemmas are lower-cased before they reach the engine. Aggregate lookups walk
ALL_POS in order and concatenate per-POS results without de-duplication:
every sense contributes its own synset, even when two senses share one.
"""

from __future__ import annotations

from typing import List

from wnquery.core.errors import InvalidPosError, NotFoundError
from wnquery.core.lexical import coerce_pos, fan_out
from wnquery.core.models import IndexEntry, SenseEntry, Synset
from wnquery.processing.handle import DictionaryHandle


class QueryAggregator:
    """Sense and synset lookups over a shared dictionary handle.

    With `strict_pos` off, unrecognized POS codes are handed to the engine,
    which answers them with empty results. With it on, they raise
    InvalidPosError before the engine is consulted.
    """

    def __init__(self, handle: DictionaryHandle, strict_pos: bool = False) -> None:
        self.handle = handle
        self.strict_pos = strict_pos

    def _check_pos(self, pos: int) -> int:
        if self.strict_pos and coerce_pos(pos) is None:
            raise InvalidPosError(pos)
        return pos

    def senses_for_lemma(self, lemma: str) -> List[SenseEntry]:
        engine = self.handle.require()
        key = lemma.lower()
        senses: List[SenseEntry] = []
        for _, found in fan_out(lambda pos: engine.lookup_senses(key, pos)):
            senses.extend(found)
        return senses

    def senses_for_lemma_and_pos(self, lemma: str, pos: int) -> List[SenseEntry]:
        engine = self.handle.require()
        return engine.lookup_senses(lemma.lower(), self._check_pos(pos))

    def sense_for_lemma(self, lemma: str, pos: int, sense_number: int) -> SenseEntry:
        """Return one numbered sense (1-based) of a lemma under a POS."""
        for entry in self.senses_for_lemma_and_pos(lemma, pos):
            if entry.sense_number == sense_number:
                return entry
        raise NotFoundError(pos, f"{lemma.lower()}#{sense_number}")

    def index_entry(self, lemma: str, pos: int) -> IndexEntry:
        senses = self.senses_for_lemma_and_pos(lemma, pos)
        if not senses:
            raise NotFoundError(pos, lemma.lower())
        return IndexEntry(
            lemma=lemma.lower(),
            pos=senses[0].pos,
            synset_offsets=[entry.synset_offset for entry in senses],
        )

    def synsets_for_lemma(self, lemma: str) -> List[Synset]:
        return [entry.synset for entry in self.senses_for_lemma(lemma)]

    def synsets_for_lemma_and_pos(self, lemma: str, pos: int) -> List[Synset]:
        return [entry.synset for entry in self.senses_for_lemma_and_pos(lemma, pos)]

    def synset(self, pos: int, offset: int) -> Synset:
        engine = self.handle.require()
        return engine.get_synset(self._check_pos(pos), offset)
