"""
Core lexical vocabulary shared by the query layer.

Defines the part-of-speech enumeration with its stable integer codes, the
fixed fan-out order used by every aggregate lookup, and small helpers for
mapping codes and names onto the enumeration.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class PartOfSpeech(int, Enum):
    """WordNet part of speech categories.

    The integer values are the codes callers send and receive. The letter is
    the single-character tag used by WordNet database files and by NLTK.
    """

    NOUN = 1
    VERB = 2
    ADJECTIVE = 3
    ADVERB = 4
    ADJECTIVE_SATELLITE = 5

    @property
    def letter(self) -> str:
        return POS_LETTER_MAP[self]


# Fan-out order for aggregate lookups and morphology
ALL_POS: Tuple[PartOfSpeech, ...] = (
    PartOfSpeech.NOUN,
    PartOfSpeech.VERB,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADVERB,
    PartOfSpeech.ADJECTIVE_SATELLITE,
)

POS_LETTER_MAP = {
    PartOfSpeech.NOUN: "n",
    PartOfSpeech.VERB: "v",
    PartOfSpeech.ADJECTIVE: "a",
    PartOfSpeech.ADVERB: "r",
    PartOfSpeech.ADJECTIVE_SATELLITE: "s",
}

# Names accepted on the command line, including the usual abbreviations
POS_NAME_MAP: Dict[str, PartOfSpeech] = {
    "noun": PartOfSpeech.NOUN,
    "n": PartOfSpeech.NOUN,
    "verb": PartOfSpeech.VERB,
    "v": PartOfSpeech.VERB,
    "adjective": PartOfSpeech.ADJECTIVE,
    "adj": PartOfSpeech.ADJECTIVE,
    "a": PartOfSpeech.ADJECTIVE,
    "adverb": PartOfSpeech.ADVERB,
    "adv": PartOfSpeech.ADVERB,
    "r": PartOfSpeech.ADVERB,
    "satellite": PartOfSpeech.ADJECTIVE_SATELLITE,
    "sat": PartOfSpeech.ADJECTIVE_SATELLITE,
    "s": PartOfSpeech.ADJECTIVE_SATELLITE,
}

PosCode = Union[PartOfSpeech, int]


def coerce_pos(code: PosCode) -> Optional[PartOfSpeech]:
    """Return the PartOfSpeech for a code, or None if the code is unrecognized."""
    if isinstance(code, PartOfSpeech):
        return code
    try:
        return PartOfSpeech(code)
    except ValueError:
        return None


def parse_pos(text: str) -> int:
    """Parse a POS given as an integer code or a name.

    Unrecognized integers are returned unchanged so the lookup layer can
    decide whether to pass them through.

    Raises:
        ValueError: if the text is neither an integer nor a known name
    """
    cleaned = text.strip().lower()
    if cleaned.lstrip("-").isdigit():
        return int(cleaned)
    if cleaned in POS_NAME_MAP:
        return POS_NAME_MAP[cleaned]
    raise ValueError(f"Unknown part of speech: {text}")


def fan_out(lookup: Callable[[PartOfSpeech], T]) -> List[Tuple[PartOfSpeech, T]]:
    """Run a per-POS lookup over ALL_POS, keeping enumeration order."""
    return [(pos, lookup(pos)) for pos in ALL_POS]
