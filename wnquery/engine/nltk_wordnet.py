"""
NLTK-backed dictionary engine.

Wraps nltk's WordNetCorpusReader, which parses a WordNet 3.x database
directory (index.*, data.*, *.exc, lexnames). This adapter maps the reader's
letter-tagged results onto the query layer's models and error types, and
reduces inflected forms itself so that the caller's casing survives.
"""

from __future__ import annotations

import threading
import warnings
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

import nltk
from nltk.corpus.reader.wordnet import WordNetCorpusReader, WordNetError

from wnquery.core.constants import DATA_FILES, EXCEPTION_FILES, INDEX_FILES, LEXNAMES_FILE
from wnquery.core.errors import DictionaryIOError, DictionaryParseError, NotFoundError
from wnquery.core.lexical import POS_LETTER_MAP, PartOfSpeech, coerce_pos
from wnquery.core.models import SenseEntry, Synset
from wnquery.core.utils import find_missing_file, get_logger
from wnquery.engine.base import DictionaryEngine

logger = get_logger(__name__)

LETTER_POS_MAP: Dict[str, PartOfSpeech] = {letter: pos for pos, letter in POS_LETTER_MAP.items()}

EXCEPTION_FILE_POS: Dict[str, PartOfSpeech] = {
    "noun.exc": PartOfSpeech.NOUN,
    "verb.exc": PartOfSpeech.VERB,
    "adj.exc": PartOfSpeech.ADJECTIVE,
    "adv.exc": PartOfSpeech.ADVERB,
}


class DirectoryWordNetReader(WordNetCorpusReader):
    """WordNetCorpusReader over a standalone database directory.

    The stock reader maps every synset onto NLTK's downloaded WordNet 3.0 for
    multilingual lookups; a standalone directory has no such corpus beside it.
    """

    def map_wn(self, version="wordnet"):
        return None


def authorize_directory(directory: Union[str, Path]) -> str:
    """Register a database directory on nltk.data.path and return it resolved.

    NLTK refuses to open corpus roots outside its data path.
    """
    root = str(Path(directory).resolve())
    if root not in nltk.data.path:
        nltk.data.path.append(root)
    return root


class NltkWordNetEngine(DictionaryEngine):
    """Dictionary engine over an on-disk WordNet database read by NLTK.

    Usage:
        engine = NltkWordNetEngine.open("/usr/share/wordnet/dict")
        engine.initialize_morphology("/usr/share/wordnet/dict")
        engine.reduce_word("shone", 2)  # "shine"
    """

    def __init__(self, reader: WordNetCorpusReader, directory: Union[str, Path]) -> None:
        self._reader = reader
        self.directory = str(directory)
        self._exceptions: Dict[PartOfSpeech, Dict[str, List[str]]] = {}
        # The reader seeks shared data file handles on every synset read
        self._lock = threading.RLock()

    @classmethod
    def open(cls, directory: Union[str, Path]) -> "NltkWordNetEngine":
        # NLTK also reads the exception lists while parsing
        missing = find_missing_file(directory, INDEX_FILES + DATA_FILES + (LEXNAMES_FILE,) + EXCEPTION_FILES)
        if missing:
            raise DictionaryIOError(missing, "no such file or directory")

        logger.info("Parsing WordNet database in %s", directory)
        root = authorize_directory(directory)
        try:
            with warnings.catch_warnings():
                # No multilingual reader is attached
                warnings.simplefilter("ignore")
                reader = DirectoryWordNetReader(root, None)
        except OSError as exc:
            path = getattr(exc, "filename", None) or str(directory)
            raise DictionaryIOError(path, exc.strerror or str(exc)) from exc
        except (WordNetError, ValueError, LookupError, AssertionError) as exc:
            raise DictionaryParseError(str(directory), exc) from exc
        return cls(reader, directory)

    def initialize_morphology(self, directory: Union[str, Path]) -> None:
        """Load the exception lists (irregular form -> base forms) per POS."""
        exceptions: Dict[PartOfSpeech, Dict[str, List[str]]] = {}
        for name, pos in EXCEPTION_FILE_POS.items():
            path = Path(directory) / name
            table: Dict[str, List[str]] = {}
            try:
                with open(path, encoding="utf-8") as fp:
                    for line_number, line in enumerate(fp, start=1):
                        fields = line.split()
                        if not fields:
                            continue
                        if len(fields) < 2:
                            raise DictionaryParseError(str(path), f"line {line_number}: no base form")
                        table[fields[0]] = fields[1:]
            except OSError as exc:
                raise DictionaryIOError(str(path), exc.strerror or str(exc)) from exc
            exceptions[pos] = table
        exceptions[PartOfSpeech.ADJECTIVE_SATELLITE] = exceptions[PartOfSpeech.ADJECTIVE]
        self._exceptions = exceptions
        logger.debug("Loaded morphology exception lists from %s", directory)

    def lookup_senses(self, lemma: str, pos: int) -> List[SenseEntry]:
        """Return the senses listed in the index for exactly this lemma.

        Head adjectives and satellites share index.adj; sense numbers follow
        its order, and each POS keeps only the synsets of its own type.
        """
        part = coerce_pos(pos)
        if part is None:
            return []

        key = lemma.lower().replace(" ", "_")
        index_letter = self._index_letter(part)
        entries: List[SenseEntry] = []
        seen: Set[int] = set()
        with self._lock:
            for number, offset in enumerate(self._offsets(key, index_letter), start=1):
                if offset in seen:
                    continue
                seen.add(offset)
                synset = self._read_synset(index_letter, offset)
                if synset is None or synset.pos() != part.letter:
                    continue
                match = self._find_lemma(synset, key)
                entries.append(
                    SenseEntry(
                        lemma=lemma,
                        pos=part,
                        sense_number=number,
                        synset_offset=offset,
                        sense_key=match.key() if match is not None else "",
                        synset=self._to_synset(synset),
                    )
                )
        return entries

    def reduce_word(self, word: str, pos: int) -> str:
        """Return the first base form of `word` found under `pos`, or "".

        The exception list is consulted first and the suffix rules only when
        it has no entry. Candidates keep the casing of `word`; existence is
        checked against the lower-cased index.
        """
        part = coerce_pos(pos)
        if part is None or not word:
            return ""

        exceptions = self._exceptions.get(part, {})
        if word in exceptions:
            forms = exceptions[word]
        else:
            substitutions = WordNetCorpusReader.MORPHOLOGICAL_SUBSTITUTIONS[part.letter]
            forms = [word[: -len(old)] + new for old, new in substitutions if word.endswith(old)]

        with self._lock:
            for form in [word] + forms:
                if self._offsets(form.lower(), part.letter):
                    return form
        return ""

    def get_synset(self, pos: int, offset: int) -> Synset:
        """Read the synset at `offset` in the data file for `pos`.

        The returned synset carries the type recorded in the data file, so a
        satellite read through the adjective code comes back with pos 5.
        """
        part = coerce_pos(pos)
        if part is None:
            raise NotFoundError(pos, offset)

        with self._lock:
            try:
                synset = self._read_synset(part.letter, offset)
            except (WordNetError, ValueError, KeyError, OSError, AssertionError) as exc:
                raise NotFoundError(part, offset) from exc
        if synset is None:
            raise NotFoundError(part, offset)
        return self._to_synset(synset)

    def _index_letter(self, part: PartOfSpeech) -> str:
        if part is PartOfSpeech.ADJECTIVE_SATELLITE:
            return PartOfSpeech.ADJECTIVE.letter
        return part.letter

    def _offsets(self, key: str, letter: str) -> List[int]:
        # Read-only view; .get avoids growing the reader's defaultdict
        return self._reader._lemma_pos_offset_map.get(key, {}).get(letter, [])

    def _read_synset(self, letter: str, offset: int) -> Optional[Any]:
        with warnings.catch_warnings():
            # A bad offset makes NLTK warn and return None
            warnings.simplefilter("ignore")
            return self._reader.synset_from_pos_and_offset(letter, offset)

    @staticmethod
    def _find_lemma(synset: Any, key: str) -> Any:
        for candidate in synset.lemmas():
            if candidate.name().lower() == key:
                return candidate
        return None

    @staticmethod
    def _to_synset(synset: Any) -> Synset:
        return Synset(
            pos=LETTER_POS_MAP[synset.pos()],
            offset=synset.offset(),
            lex_name=synset.lexname(),
            words=list(synset.lemma_names()),
            definition=synset.definition(),
            examples=list(synset.examples()),
        )
