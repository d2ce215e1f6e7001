"""
Lexicon Store — Per-Language Word Lists

Holds the registered LanguageDictionary objects and a merged,
de-duplicated, lowercase view of their words (the WordLists snapshot).

The merged view is rebuilt on every registration, never on the
classification path. Readers take the current snapshot reference, which
is an immutable value; writers build a new snapshot under a lock and swap
it in. Concurrent classification therefore always sees a consistent
snapshot, and registration can happen at any time.

Usage:
    store = LexiconStore()
    store.register_language("en", ENGLISH)
    store.add_word("numpty", "anger")
    lists = store.merged_word_lists()
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Iterable, Mapping, Optional, Union

from eumenides.schemas.dictionary import LanguageDictionary, WORD_CATEGORIES

logger = logging.getLogger(__name__)

DictionaryInput = Union[LanguageDictionary, Mapping, None]

# Accepted spellings for add_word categories
_CATEGORY_ALIASES = {
    "anger": "anger",
    "very_negative": "very_negative",
    "verynegative": "very_negative",
    "very-negative": "very_negative",
    "frustration": "frustration",
}


@lru_cache(maxsize=4096)
def word_pattern(word: str) -> re.Pattern:
    """Compiled whole-word matcher for a lowercase word or phrase."""
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)")


@dataclass(frozen=True)
class WordLists:
    """Merged lowercase word lists across every registered language."""
    anger: tuple[str, ...] = ()
    very_negative: tuple[str, ...] = ()
    frustration: tuple[str, ...] = ()

    @property
    def negative(self) -> tuple[str, ...]:
        """Anger and very-negative words combined, without duplicates."""
        return tuple(dict.fromkeys(self.anger + self.very_negative))

    @property
    def total(self) -> int:
        return len(self.anger) + len(self.very_negative) + len(self.frustration)


def merge_dictionaries(dictionaries: Iterable[LanguageDictionary]) -> WordLists:
    """Union of all dictionaries, lowercased, first occurrence order kept."""
    merged: dict[str, dict[str, None]] = {c: {} for c in WORD_CATEGORIES}
    for dictionary in dictionaries:
        for category in WORD_CATEGORIES:
            for word in dictionary.words(category):
                merged[category].setdefault(word.strip().lower(), None)
    return WordLists(**{c: tuple(words) for c, words in merged.items()})


def normalize_category(category: str) -> str:
    """Map a category spelling to its canonical name. Raises ValueError."""
    key = str(category).strip().lower().replace(" ", "_")
    try:
        return _CATEGORY_ALIASES[key]
    except KeyError:
        raise ValueError(
            f"Unknown word category: {category!r} "
            f"(expected one of {', '.join(WORD_CATEGORIES)})"
        ) from None


def _coerce_dictionary(code: str, dictionary: DictionaryInput) -> LanguageDictionary:
    if isinstance(dictionary, LanguageDictionary):
        if dictionary.code == code:
            return dictionary
        return dictionary.model_copy(update={"code": code})
    if not isinstance(dictionary, Mapping):
        logger.warning(
            "Dictionary for %s is not a mapping; registering it empty", code,
            extra={"language": code},
        )
        return LanguageDictionary(code=code)
    data = {k: v for k, v in dictionary.items() if k not in ("code", "language_code")}
    return LanguageDictionary.model_validate({**data, "code": code})


class LexiconStore:
    """
    Registry of language dictionaries plus their merged word lists.

    Each instance is isolated: tests and multi-tenant hosts can build as
    many stores as they like. Mutating methods are synchronized; reads are
    lock-free snapshot reads.
    """

    def __init__(
        self,
        dictionaries: Optional[Iterable[LanguageDictionary]] = None,
    ):
        self._lock = threading.Lock()
        self._dictionaries: dict[str, LanguageDictionary] = {}
        self._word_lists = WordLists()
        for dictionary in dictionaries or ():
            self.register_language(dictionary.code, dictionary)

    # --- Registration ---

    def register_language(self, code: str, dictionary: DictionaryInput) -> LanguageDictionary:
        """
        Add or replace a language's word lists. Last write wins.

        Malformed input is normalized (see LanguageDictionary); this never
        raises for bad dictionary content.
        """
        entry = _coerce_dictionary(code, dictionary)
        with self._lock:
            self._dictionaries[code] = entry
            self._word_lists = merge_dictionaries(self._dictionaries.values())
            total = self._word_lists.total

        logger.info(
            "Registered language %s (%s): %d words, %d merged",
            code, entry.display_name, entry.word_count(), total,
            extra={"language": code, "words": entry.word_count()},
        )
        return entry

    def add_word(self, word: str, category: str = "anger", language: str = "custom") -> bool:
        """
        Add one word to a language and to the merged lists.

        The word is lowercased. A word already present in the merged
        category is left alone. Returns True when the word was added.
        A "Custom" dictionary is created for an unknown language code.
        """
        category = normalize_category(category)
        word = str(word).strip().lower()
        if not word:
            raise ValueError("Cannot add an empty word")

        field_name = WORD_CATEGORIES[category]
        with self._lock:
            lists = self._word_lists
            current = getattr(lists, category)
            if word in current:
                return False

            dictionary = self._dictionaries.get(language) or LanguageDictionary(
                code=language, name="Custom",
            )
            self._dictionaries[language] = dictionary.model_copy(
                update={field_name: getattr(dictionary, field_name) + (word,)},
            )
            self._word_lists = replace(lists, **{category: current + (word,)})

        logger.debug(
            "Added %s word to %s", category, language,
            extra={"language": language},
        )
        return True

    # --- Reads ---

    def merged_word_lists(self) -> WordLists:
        """Current merged snapshot. Safe to hold across calls; never mutated."""
        return self._word_lists

    @property
    def word_lists(self) -> WordLists:
        return self._word_lists

    def dictionaries(self) -> dict[str, LanguageDictionary]:
        with self._lock:
            return dict(self._dictionaries)

    def get_language(self, code: str) -> Optional[LanguageDictionary]:
        return self._dictionaries.get(code)

    def supported_languages(self) -> list[dict]:
        return [
            {"code": code, "name": d.display_name}
            for code, d in self.dictionaries().items()
        ]

    def stats(self) -> dict:
        """Word counts per language and merged totals."""
        with self._lock:
            dictionaries = dict(self._dictionaries)
            lists = self._word_lists

        return {
            "total_languages": len(dictionaries),
            "languages": list(dictionaries),
            "total_anger_words": len(lists.anger),
            "total_very_negative_words": len(lists.very_negative),
            "total_frustration_words": len(lists.frustration),
            "total_words": lists.total,
            "by_language": {
                code: {
                    "name": d.display_name,
                    "anger": len(d.anger_words),
                    "very_negative": len(d.very_negative_words),
                    "frustration": len(d.frustration_words),
                    "total": d.word_count(),
                }
                for code, d in dictionaries.items()
            },
        }

    def __len__(self) -> int:
        return len(self._dictionaries)

    def __contains__(self, code: object) -> bool:
        return code in self._dictionaries
