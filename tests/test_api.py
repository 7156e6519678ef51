"""Tests for the envelope-returning public API."""

import json

import pytest

from wnquery.api import WordNetService, get_service
from wnquery.core.constants import ERROR_NOT_LOADED
from wnquery.core.lexical import ALL_POS, PartOfSpeech
from wnquery.core.models import ServiceConfig
from wnquery.processing.handle import DictionaryHandle


def decode(envelope):
    return json.loads(envelope)


class TestLoad:
    """Test load through the service boundary."""

    def test_load_succeeds(self, service):
        assert decode(service.load("fake-dict")) == {"error": ""}
        assert service.handle.is_loaded

    def test_second_load_is_noop(self, service, engine_factory):
        service.load("fake-dict")
        engine = service.handle.require()
        assert decode(service.load("another-dict")) == {"error": ""}
        assert service.handle.require() is engine
        assert engine_factory.open_calls == 1

    def test_missing_directory(self, service):
        result = decode(service.load("unknown"))
        assert "unknown/index.noun" in result["error"]
        assert not service.handle.is_loaded

    def test_valid_load_after_failure(self, service):
        service.load("unknown")
        assert decode(service.load("fake-dict")) == {"error": ""}
        assert service.handle.is_loaded

    def test_load_uses_configured_directory(self, engine_factory):
        service = WordNetService(
            handle=DictionaryHandle(engine_factory=engine_factory),
            config=ServiceConfig(dictionary_dir="fake-dict"),
        )
        assert decode(service.load()) == {"error": ""}
        assert service.handle.require().directory == "fake-dict"

    def test_load_without_directory(self, service):
        result = decode(service.load())
        assert result["error"]
        assert not service.handle.is_loaded


class TestNotLoaded:
    """Every query returns the not-loaded error before a load."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.lookup("test"),
            lambda s: s.lookup_with_pos("test", 1),
            lambda s: s.lookup_index_with_pos("test", 1),
            lambda s: s.lookup_with_pos_and_sense("test", 1, 1),
            lambda s: s.get_synset(1, 100),
            lambda s: s.get_synsets_with_lemma("test"),
            lambda s: s.get_synsets_with_lemma_and_pos("test", 1),
            lambda s: s.morph("lives"),
        ],
    )
    def test_error_envelope(self, service, engine_factory, call):
        assert decode(call(service)) == {"error": ERROR_NOT_LOADED}
        assert engine_factory.open_calls == 0


class TestQueries:
    """Test data envelopes from a loaded service."""

    def test_lookup_case_insensitive(self, loaded_service):
        assert loaded_service.lookup("test") == loaded_service.lookup("TEST")

    def test_lookup_returns_sense_entries(self, loaded_service):
        data = decode(loaded_service.lookup("test"))["data"]
        assert len(data) == 13
        assert data[0]["lemma"] == "test"
        assert data[0]["pos"] == 1
        assert data[-1]["pos"] == 2
        assert "synset" not in data[0]

    def test_lookup_with_pos(self, loaded_service):
        data = decode(loaded_service.lookup_with_pos("Test", 1))["data"]
        assert [entry["synset_offset"] for entry in data] == [100, 101, 102, 103, 104, 105]

    def test_lookup_index_with_pos(self, loaded_service):
        data = decode(loaded_service.lookup_index_with_pos("test", 2))["data"]
        assert data["lemma"] == "test"
        assert data["pos"] == 2
        assert len(data["synset_offsets"]) == 7

    def test_lookup_with_pos_and_sense(self, loaded_service):
        data = decode(loaded_service.lookup_with_pos_and_sense("test", 2, 2))["data"]
        assert data["sense_number"] == 2
        assert data["synset_offset"] == 201

    def test_lookup_with_pos_and_missing_sense(self, loaded_service):
        result = decode(loaded_service.lookup_with_pos_and_sense("test", 2, 20))
        assert set(result) == {"error"}
        assert result["error"]

    def test_get_synset(self, loaded_service):
        data = decode(loaded_service.get_synset(1, 104))["data"]
        assert data["offset"] == 104
        assert data["pos"] == 1

    def test_get_synset_not_found(self, loaded_service):
        result = decode(loaded_service.get_synset(1, 999))
        assert "999" in result["error"]

    def test_synsets_with_lemma_is_concatenation(self, loaded_service):
        full = decode(loaded_service.get_synsets_with_lemma("test"))["data"]
        joined = []
        for pos in ALL_POS:
            joined.extend(decode(loaded_service.get_synsets_with_lemma_and_pos("test", pos))["data"])
        assert full == joined
        assert len(full) == 13

    def test_unknown_lemma_is_empty_data(self, loaded_service):
        assert decode(loaded_service.get_synsets_with_lemma("qwzx")) == {"data": []}

    def test_unknown_pos_is_empty_data(self, loaded_service):
        assert decode(loaded_service.get_synsets_with_lemma_and_pos("test", 42)) == {"data": []}

    def test_morph_lives(self, loaded_service):
        assert decode(loaded_service.morph("lives")) == {"data": {"life": [1], "live": [2]}}

    def test_morph_shone(self, loaded_service):
        assert decode(loaded_service.morph("shone")) == {"data": {"shine": [2]}}

    def test_morph_nothing(self, loaded_service):
        assert decode(loaded_service.morph("qwzx")) == {"data": {}}

    def test_get_synset_with_non_integer_pos(self, loaded_service):
        """A POS the enumeration can't hold is reported as not found."""
        result = decode(loaded_service.get_synset("noun", 100))
        assert result == {"error": "not found: pos=noun key=100"}


class TestStrictPosService:
    """Test the strict POS option through the service."""

    def test_unknown_pos_is_error(self, engine_factory):
        service = WordNetService(
            handle=DictionaryHandle(engine_factory=engine_factory),
            config=ServiceConfig(strict_pos=True),
        )
        service.load("fake-dict")
        result = decode(service.get_synsets_with_lemma_and_pos("test", 42))
        assert "42" in result["error"]


class TestUnexpectedErrors:
    """Engine failures never escape the boundary."""

    def test_engine_exception_becomes_error(self, loaded_service, monkeypatch):
        engine = loaded_service.handle.require()

        def explode(word, pos):
            raise RuntimeError("engine exploded")

        monkeypatch.setattr(engine, "reduce_word", explode)
        assert decode(loaded_service.morph("lives")) == {"error": "engine exploded"}


class TestGetService:
    """Test the shared service accessor."""

    def test_returns_same_instance(self, monkeypatch):
        monkeypatch.setattr("wnquery.api._service", None)
        first = get_service(ServiceConfig())
        assert get_service() is first
        assert isinstance(first, WordNetService)
