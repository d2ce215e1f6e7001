"""
Eumenides — Multi-Language Aggression Detection

Decides whether a social-media post is aggressive enough to hold back,
from a lexical score over six bundled languages and a sensitivity level.

    from eumenides import classify
    result = classify("You are all INCOMPETENT IDIOTS!!!", "medium")
    result.is_aggressive, result.score, result.emotion, result.reasons

Components:
  - LexiconStore:      per-language word lists, merged for lookup
  - AggressionDetector: rule-based scoring + sensitivity thresholds
  - HybridDetector:    optional secondary classifier for borderline scores
"""

__version__ = "1.0.0"

from eumenides.detector import (
    AggressionDetector,
    AnalysisResult,
    NEUTRAL_RESULT,
    classify,
    explain,
    get_detector,
)
from eumenides.dictionaries import build_default_store
from eumenides.hybrid import HybridDetector, HybridResult
from eumenides.lexicon import LexiconStore, WordLists
from eumenides.schemas import LanguageDictionary, ToxicityVerdict
from eumenides.sensitivity import (
    available_sensitivities,
    is_available,
    resolve_sensitivity,
    threshold_for,
)


__all__ = [
    "AggressionDetector",
    "AnalysisResult",
    "HybridDetector",
    "HybridResult",
    "LanguageDictionary",
    "LexiconStore",
    "NEUTRAL_RESULT",
    "ToxicityVerdict",
    "WordLists",
    "available_sensitivities",
    "build_default_store",
    "classify",
    "explain",
    "get_detector",
    "is_available",
    "resolve_sensitivity",
    "threshold_for",
]
