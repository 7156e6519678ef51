"""
Load-once lifecycle for the dictionary engine.

A DictionaryHandle holds at most one loaded engine. The first successful load
installs it; later loads are no-ops. Queries fetch the engine through
require(), which fails fast when nothing is installed.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional, Type, Union

from wnquery.core.errors import NotLoadedError, WordNetQueryError
from wnquery.core.utils import get_logger
from wnquery.engine.base import DictionaryEngine
from wnquery.engine.nltk_wordnet import NltkWordNetEngine

logger = get_logger(__name__)


def load_dictionary(
    directory: Union[str, Path],
    engine_factory: Type[DictionaryEngine] = NltkWordNetEngine,
) -> DictionaryEngine:
    """Open, parse and initialize morphology for the dictionary in `directory`.

    Nothing is installed anywhere; the caller owns the returned engine.

    Raises:
        DictionaryIOError: a dictionary file is missing or unreadable
        DictionaryParseError: a dictionary file is malformed
    """
    engine = engine_factory.open(directory)
    engine.initialize_morphology(directory)
    return engine


class DictionaryHandle:
    """Shared, initialize-once reference to a loaded dictionary engine."""

    def __init__(self, engine_factory: Type[DictionaryEngine] = NltkWordNetEngine) -> None:
        self._engine_factory = engine_factory
        self._engine: Optional[DictionaryEngine] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._engine is not None

    def ensure_loaded(self, directory: Union[str, Path]) -> DictionaryEngine:
        """Load and install the engine unless one is already installed.

        Concurrent first callers are serialized: exactly one load runs and
        every caller gets the same engine back. A failed load leaves the
        handle empty so the call can be retried.
        """
        engine = self._engine
        if engine is not None:
            logger.debug("Dictionary already loaded; ignoring load of %s", directory)
            return engine

        with self._lock:
            if self._engine is not None:
                logger.debug("Dictionary loaded by another caller; ignoring load of %s", directory)
                return self._engine
            try:
                engine = load_dictionary(directory, self._engine_factory)
            except WordNetQueryError as exc:
                logger.error("Failed to load dictionary from %s: %s", directory, exc)
                raise
            self._engine = engine
            logger.info("Dictionary loaded from %s", directory)
            return engine

    def require(self) -> DictionaryEngine:
        """Return the installed engine.

        Raises:
            NotLoadedError: no dictionary has been loaded yet
        """
        engine = self._engine
        if engine is None:
            raise NotLoadedError()
        return engine
