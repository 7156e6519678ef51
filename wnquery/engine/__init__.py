"""
Engine Package.

Dictionary engines own the loaded lexical database. The query layer depends
only on the DictionaryEngine interface; NltkWordNetEngine is the default.
"""

from wnquery.engine.base import DictionaryEngine
from wnquery.engine.nltk_wordnet import NltkWordNetEngine

__all__ = ["DictionaryEngine", "NltkWordNetEngine"]
