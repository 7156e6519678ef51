"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# Environment configuration
ENV_DICTIONARY_DIR = "WNQUERY_DICT_DIR"
ENV_STRICT_POS = "WNQUERY_STRICT_POS"
ENV_LOG_LEVEL = "WNQUERY_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# WordNet database files, keyed by the file suffix the engine uses per POS
POS_FILE_SUFFIXES = ("noun", "verb", "adj", "adv")
INDEX_FILES = tuple(f"index.{suffix}" for suffix in POS_FILE_SUFFIXES)
DATA_FILES = tuple(f"data.{suffix}" for suffix in POS_FILE_SUFFIXES)
EXCEPTION_FILES = tuple(f"{suffix}.exc" for suffix in POS_FILE_SUFFIXES)
LEXNAMES_FILE = "lexnames"

# Error messages
ERROR_NOT_LOADED = "Wordnet is not loaded."
ERROR_NO_DICTIONARY_DIR = "No dictionary directory configured."
