"""
Detector — Rule-Based Aggression Classification

The entry point used by the interception layer:

    detector = AggressionDetector(build_default_store())
    result = detector.classify(text, "medium", tier="premium")
    if result.is_aggressive:
        ...hold the post back...

classify() is total. Any string text and any sensitivity string produce
an AnalysisResult; nothing is raised. Tier is accepted for the caller's
bookkeeping only: entitlement is checked with sensitivity.is_available()
before a level is offered, never here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from eumenides.lexicon import LexiconStore
from eumenides.scorer import NEUTRAL, ScoreCard, score_text
from eumenides.sensitivity import DEFAULT_SENSITIVITY, DEFAULT_TIER, threshold_for

logger = logging.getLogger(__name__)


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one classification. A value object."""
    is_aggressive: bool
    score: float
    emotion: str
    reasons: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "is_aggressive": self.is_aggressive,
            "score": self.score,
            "emotion": self.emotion,
            "reasons": list(self.reasons),
        }


NEUTRAL_RESULT = AnalysisResult(
    is_aggressive=False, score=0.0, emotion=NEUTRAL, reasons=(),
)


def _format_score(score: float) -> str:
    return f"{score:g}"


def explain(result) -> str:
    """One human-readable sentence for an analysis (or hybrid) result."""
    if not result.is_aggressive:
        return "Content appears neutral or positive."

    parts = [
        f"Aggression score: {_format_score(result.score)}",
        f"Detected emotion: {result.emotion}",
    ]
    if result.reasons:
        parts.append(f"Reasons: {', '.join(result.reasons)}")
    return ". ".join(parts)


# ============================================================
# DETECTOR
# ============================================================

class AggressionDetector:
    """
    Scores text against a LexiconStore and applies sensitivity thresholds.

    Holds no state of its own beyond the store reference. Every call
    reads the store's current snapshot once, so a concurrent registration
    never produces a half-updated result.
    """

    def __init__(self, lexicon: LexiconStore):
        self._lexicon = lexicon

    @property
    def lexicon(self) -> LexiconStore:
        return self._lexicon

    def score(self, text: Optional[str]) -> ScoreCard:
        """Sensitivity-independent scoring pass."""
        if not isinstance(text, str):
            text = ""
        return score_text(text, self._lexicon.merged_word_lists())

    def classify(
        self,
        text: Optional[str],
        sensitivity: str = DEFAULT_SENSITIVITY,
        tier: str = DEFAULT_TIER,
    ) -> AnalysisResult:
        """
        Decide whether text is aggressive at the given sensitivity.

        Args:
            text: The post or comment. Empty / None yields the neutral result.
            sensitivity: Level name or alias; unknown names use medium.
            tier: Caller's entitlement tier. Informational only.

        Returns:
            AnalysisResult with is_aggressive = score >= threshold.
        """
        card = self.score(text)
        if not card.signals:
            return NEUTRAL_RESULT
        return self.decide(card, sensitivity, tier)

    def decide(
        self,
        card: ScoreCard,
        sensitivity: str = DEFAULT_SENSITIVITY,
        tier: str = DEFAULT_TIER,
    ) -> AnalysisResult:
        """Apply a sensitivity threshold to an existing score card."""
        threshold = threshold_for(sensitivity)
        result = AnalysisResult(
            is_aggressive=card.score >= threshold,
            score=card.score,
            emotion=card.emotion,
            reasons=card.reasons,
        )
        logger.debug(
            "Classified text: score=%s threshold=%s aggressive=%s",
            _format_score(card.score), threshold, result.is_aggressive,
            extra={
                "score": card.score,
                "sensitivity": sensitivity,
                "tier": tier,
                "emotion": card.emotion,
                "is_aggressive": result.is_aggressive,
            },
        )
        return result

    # --- Introspection ---

    def explain(self, result: AnalysisResult) -> str:
        return explain(result)

    def stats(self) -> dict:
        return self._lexicon.stats()

    def supported_languages(self) -> list[dict]:
        return self._lexicon.supported_languages()


# ============================================================
# PROCESS-WIDE DEFAULT
# ============================================================

@lru_cache(maxsize=1)
def get_detector() -> AggressionDetector:
    """Shared detector over the bundled dictionaries, built on first use."""
    from eumenides.dictionaries import build_default_store

    return AggressionDetector(build_default_store())


def classify(
    text: Optional[str],
    sensitivity: str = DEFAULT_SENSITIVITY,
    tier: str = DEFAULT_TIER,
) -> AnalysisResult:
    """classify() on the shared default detector."""
    return get_detector().classify(text, sensitivity, tier)
