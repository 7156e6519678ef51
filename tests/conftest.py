"""
Pytest configuration and shared fixtures.

Ensures the project root is on sys.path so that `import wnquery` works
regardless of how pytest is invoked, and provides an in-memory dictionary
engine so the query layer can be tested without a WordNet database.
"""

import os
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple, Type, Union

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

from wnquery.core.errors import DictionaryIOError, NotFoundError  # noqa: E402
from wnquery.core.lexical import PartOfSpeech, coerce_pos  # noqa: E402
from wnquery.core.models import SenseEntry, ServiceConfig, Synset  # noqa: E402
from wnquery.engine.base import DictionaryEngine  # noqa: E402
from wnquery.processing.handle import DictionaryHandle  # noqa: E402

NOUN = PartOfSpeech.NOUN
VERB = PartOfSpeech.VERB
ADJ = PartOfSpeech.ADJECTIVE
SAT = PartOfSpeech.ADJECTIVE_SATELLITE

# (lemma, pos) -> synset offsets in sense order
FAKE_SENSES: Dict[Tuple[str, PartOfSpeech], List[int]] = {
    ("test", NOUN): [100, 101, 102, 103, 104, 105],
    ("test", VERB): [200, 201, 202, 203, 204, 205, 206],
    ("good", ADJ): [300, 301],
    ("good", SAT): [310],
    ("bank", NOUN): [400, 400, 401],
}

# (word, pos) -> base form
FAKE_MORPHS: Dict[Tuple[str, PartOfSpeech], str] = {
    ("lives", NOUN): "life",
    ("lives", VERB): "live",
    ("Lives", VERB): "Live",
    ("shone", VERB): "shine",
    ("bigger", ADJ): "big",
    ("bigger", SAT): "big",
}

MISSING_DIR = "unknown"


class FakeDictionaryEngine(DictionaryEngine):
    """In-memory engine with a handful of lemmas and morph rules.

    `open` fails for MISSING_DIR the way a real engine fails on a missing
    index file. Each subclass counts its own opens.
    """

    open_calls = 0
    open_delay = 0.0

    def __init__(self, directory: str) -> None:
        self.directory = directory
        self.morphology_ready = False
        self.calls: List[str] = []

    @classmethod
    def open(cls, directory: Union[str, Path]) -> "FakeDictionaryEngine":
        cls.open_calls += 1
        if cls.open_delay:
            time.sleep(cls.open_delay)
        if str(directory) == MISSING_DIR:
            raise DictionaryIOError(f"{directory}/index.noun", "no such file or directory")
        return cls(str(directory))

    def initialize_morphology(self, directory: Union[str, Path]) -> None:
        self.morphology_ready = True

    def lookup_senses(self, lemma: str, pos: int) -> List[SenseEntry]:
        self.calls.append(f"lookup_senses:{lemma}:{pos}")
        part = coerce_pos(pos)
        if part is None:
            return []
        return [
            SenseEntry(
                lemma=lemma,
                pos=part,
                sense_number=number,
                synset_offset=offset,
                sense_key=f"{lemma}%{int(part)}:{number:02d}",
                synset=self._synset(part, offset),
            )
            for number, offset in enumerate(FAKE_SENSES.get((lemma, part), []), start=1)
        ]

    def reduce_word(self, word: str, pos: int) -> str:
        self.calls.append(f"reduce_word:{word}:{pos}")
        part = coerce_pos(pos)
        if part is None:
            return ""
        return FAKE_MORPHS.get((word, part), "")

    def get_synset(self, pos: int, offset: int) -> Synset:
        self.calls.append(f"get_synset:{pos}:{offset}")
        part = coerce_pos(pos)
        known = {(p, o) for (_, p), offsets in FAKE_SENSES.items() for o in offsets}
        if part is None or (part, offset) not in known:
            raise NotFoundError(pos, offset)
        return self._synset(part, offset)

    @staticmethod
    def _synset(pos: PartOfSpeech, offset: int) -> Synset:
        return Synset(pos=pos, offset=offset, words=[f"word{offset}"], definition=f"definition {offset}")


@pytest.fixture
def engine_factory() -> Type[FakeDictionaryEngine]:
    """A fresh FakeDictionaryEngine subclass with its own open counter."""
    return type("CountingFakeEngine", (FakeDictionaryEngine,), {"open_calls": 0, "open_delay": 0.0})


@pytest.fixture
def handle(engine_factory):
    """An empty dictionary handle backed by the fake engine."""
    return DictionaryHandle(engine_factory=engine_factory)


@pytest.fixture
def loaded_handle(handle):
    """A dictionary handle with the fake engine installed."""
    handle.ensure_loaded("fake-dict")
    return handle


@pytest.fixture
def service(handle):
    """A service over an empty fake-backed handle."""
    from wnquery.api import WordNetService

    return WordNetService(handle=handle, config=ServiceConfig())


@pytest.fixture
def loaded_service(service):
    """A service with the fake dictionary already loaded."""
    service.load("fake-dict")
    return service

