"""
Morphological base-form resolution across parts of speech.

The input word is passed to the engine unchanged, so resolution is
case-sensitive: "Lives" and "lives" are resolved independently.
"""

from __future__ import annotations

from typing import Dict, List

from wnquery.core.lexical import PartOfSpeech, fan_out
from wnquery.processing.handle import DictionaryHandle

MorphResult = Dict[str, List[PartOfSpeech]]


class MorphologyResolver:
    """Maps an inflected word to its base forms and the POS that produced each."""

    def __init__(self, handle: DictionaryHandle) -> None:
        self.handle = handle

    def morph(self, word: str) -> MorphResult:
        """Resolve `word` under every POS and group the POS codes by base form.

        Each POS contributes at most one base form. A base form reached under
        several POS lists them in enumeration order, e.g. "lives" gives
        {"life": [NOUN], "live": [VERB]}.
        """
        engine = self.handle.require()
        result: MorphResult = {}
        for pos, base in fan_out(lambda pos: engine.reduce_word(word, pos)):
            if base:
                result.setdefault(base, []).append(pos)
        return result
