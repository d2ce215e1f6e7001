"""Validated data contracts for dictionaries and classifier verdicts."""

from eumenides.schemas.dictionary import LanguageDictionary, WORD_CATEGORIES
from eumenides.schemas.verdict import (
    ToxicityVerdict,
    TOXICITY_LABELS,
    verdict_from_probabilities,
)

__all__ = [
    "LanguageDictionary",
    "WORD_CATEGORIES",
    "ToxicityVerdict",
    "TOXICITY_LABELS",
    "verdict_from_probabilities",
]
