"""
Processing Package.

The load-once dictionary handle, the lemma and morphology lookups built on
it, and the envelope builders that serialize their results.
"""

from wnquery.processing.aggregate import QueryAggregator
from wnquery.processing.envelope import build_data, build_error
from wnquery.processing.handle import DictionaryHandle, load_dictionary
from wnquery.processing.morphology import MorphologyResolver

__all__ = [
    "DictionaryHandle",
    "load_dictionary",
    "QueryAggregator",
    "MorphologyResolver",
    "build_error",
    "build_data",
]
