"""
Language Dictionary Schema

Pydantic model for a per-language word list bundle. Dictionaries arrive
from the host environment (bundled modules, JSON files, user settings) and
are validated once, at registration time. Malformed input never fails
registration: missing or non-list word arrays become empty, non-string
entries are dropped.

Accepts both the current field names and the legacy ones
(``language_code`` / ``language_name``).
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# Category name -> LanguageDictionary field
WORD_CATEGORIES: dict[str, str] = {
    "anger": "anger_words",
    "very_negative": "very_negative_words",
    "frustration": "frustration_words",
}


class LanguageDictionary(BaseModel):
    """Word lists for one language. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(validation_alias=AliasChoices("code", "language_code"))
    name: str = Field("", validation_alias=AliasChoices("name", "language_name"))
    anger_words: tuple[str, ...] = ()
    very_negative_words: tuple[str, ...] = ()
    frustration_words: tuple[str, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value):
        return value if isinstance(value, str) else ""

    @field_validator(
        "anger_words", "very_negative_words", "frustration_words", mode="before",
    )
    @classmethod
    def _coerce_words(cls, value):
        if not isinstance(value, (list, tuple, set, frozenset)):
            return ()
        return tuple(w for w in value if isinstance(w, str) and w.strip())

    @property
    def display_name(self) -> str:
        return self.name or self.code

    def words(self, category: str) -> tuple[str, ...]:
        """Return the word list for a category ("anger", "very_negative", "frustration")."""
        return getattr(self, WORD_CATEGORIES[category])

    def word_count(self) -> int:
        return (
            len(self.anger_words)
            + len(self.very_negative_words)
            + len(self.frustration_words)
        )
