"""
Public query API.

WordNetService is the boundary of the package: each method returns one JSON
envelope string and never raises. Errors of any kind come back as
{"error": "..."}; results come back as {"data": ...}.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable, Optional, Union

from wnquery.core.constants import ERROR_NO_DICTIONARY_DIR
from wnquery.core.errors import DictionaryIOError, WordNetQueryError
from wnquery.core.models import ServiceConfig
from wnquery.core.utils import get_logger
from wnquery.processing.aggregate import QueryAggregator
from wnquery.processing.envelope import build_data, build_error
from wnquery.processing.handle import DictionaryHandle
from wnquery.processing.morphology import MorphologyResolver

logger = get_logger(__name__)


class WordNetService:
    """Envelope-returning facade over a shared dictionary handle.

    Usage:
        service = WordNetService()
        service.load("/usr/share/wordnet/dict")   # '{"error":""}'
        service.morph("lives")                    # '{"data":{"life":[1],"live":[2]}}'
    """

    def __init__(
        self,
        handle: Optional[DictionaryHandle] = None,
        config: Optional[ServiceConfig] = None,
    ) -> None:
        self.config = config or ServiceConfig()
        self.handle = handle or DictionaryHandle()
        self.queries = QueryAggregator(self.handle, strict_pos=self.config.strict_pos)
        self.morphology = MorphologyResolver(self.handle)

    def _respond(self, operation: str, produce: Callable[[], Any]) -> str:
        try:
            return build_data(produce())
        except WordNetQueryError as exc:
            logger.debug("%s failed: %s", operation, exc)
            return build_error(exc)
        except Exception as exc:
            logger.exception("Unexpected engine error in %s", operation)
            return build_error(exc)

    def load(self, directory: Optional[Union[str, Path]] = None) -> str:
        """Load the dictionary once. Later calls succeed without reloading."""
        if self.handle.is_loaded:
            return build_error(None)

        target = directory or self.config.dictionary_dir
        if not target:
            return build_error(DictionaryIOError("", ERROR_NO_DICTIONARY_DIR))
        try:
            self.handle.ensure_loaded(target)
        except WordNetQueryError as exc:
            return build_error(exc)
        except Exception as exc:
            logger.exception("Unexpected error loading %s", target)
            return build_error(exc)
        return build_error(None)

    def lookup(self, lemma: str) -> str:
        """Sense entries of `lemma` under every POS."""
        return self._respond("lookup", lambda: self.queries.senses_for_lemma(lemma))

    def lookup_with_pos(self, lemma: str, pos: int) -> str:
        """Sense entries of `lemma` under one POS."""
        return self._respond("lookup_with_pos", lambda: self.queries.senses_for_lemma_and_pos(lemma, pos))

    def lookup_index_with_pos(self, lemma: str, pos: int) -> str:
        """Index entry (synset offsets in sense order) of `lemma` under one POS."""
        return self._respond("lookup_index_with_pos", lambda: self.queries.index_entry(lemma, pos))

    def lookup_with_pos_and_sense(self, lemma: str, pos: int, sense_id: int) -> str:
        """A single numbered sense of `lemma` under one POS."""
        return self._respond(
            "lookup_with_pos_and_sense",
            lambda: self.queries.sense_for_lemma(lemma, pos, sense_id),
        )

    def get_synset(self, pos: int, offset: int) -> str:
        return self._respond("get_synset", lambda: self.queries.synset(pos, offset))

    def get_synsets_with_lemma(self, lemma: str) -> str:
        return self._respond("get_synsets_with_lemma", lambda: self.queries.synsets_for_lemma(lemma))

    def get_synsets_with_lemma_and_pos(self, lemma: str, pos: int) -> str:
        return self._respond(
            "get_synsets_with_lemma_and_pos",
            lambda: self.queries.synsets_for_lemma_and_pos(lemma, pos),
        )

    def morph(self, word: str) -> str:
        """Base forms of `word` mapped to the POS codes that produced them."""
        return self._respond("morph", lambda: self.morphology.morph(word))


# Singleton instance for shared use
_service: Optional[WordNetService] = None
_service_lock = threading.Lock()


def get_service(config: Optional[ServiceConfig] = None) -> WordNetService:
    """Get or create the shared service, configured from the environment by default."""
    global _service
    with _service_lock:
        if _service is None:
            _service = WordNetService(config=config or ServiceConfig.from_env())
    return _service
