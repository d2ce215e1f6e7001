"""
Bundled Language Dictionaries

One module per language, each defining a LanguageDictionary constant.
To add a language, drop a module here following the same structure and
append it to DEFAULT_DICTIONARIES, or register it at runtime with
LexiconStore.register_language().
"""

from __future__ import annotations

from eumenides.dictionaries.english import ENGLISH
from eumenides.dictionaries.french import FRENCH
from eumenides.dictionaries.german import GERMAN
from eumenides.dictionaries.italian import ITALIAN
from eumenides.dictionaries.portuguese import PORTUGUESE
from eumenides.dictionaries.spanish import SPANISH
from eumenides.lexicon import LexiconStore
from eumenides.schemas.dictionary import LanguageDictionary

DEFAULT_DICTIONARIES: tuple[LanguageDictionary, ...] = (
    ENGLISH,
    FRENCH,
    GERMAN,
    ITALIAN,
    PORTUGUESE,
    SPANISH,
)


def build_default_store() -> LexiconStore:
    """A fresh LexiconStore with every bundled language registered."""
    return LexiconStore(DEFAULT_DICTIONARIES)


__all__ = [
    "DEFAULT_DICTIONARIES",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "ITALIAN",
    "PORTUGUESE",
    "SPANISH",
    "build_default_store",
]
