"""
wnquery: a query and normalization layer over a WordNet-style lexical database.

This package provides lemma and part-of-speech lookups, synset retrieval and
morphological base-form resolution, each returned as a serialized JSON
envelope.
"""

__version__ = "0.1.0"
