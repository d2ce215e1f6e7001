"""
Aggression Score Calculator

Runs every signal extractor over a text and sums their contributions
into one raw aggression score. Separated from detector.py so that a
single scoring pass can be compared against any number of thresholds:
the score never depends on the sensitivity level.

The score is not clamped. Negated anger words can pull it below zero.

Reasons are reported in extractor order, which is fixed, so results are
reproducible byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass

from eumenides.lexicon import WordLists
from eumenides.signals import (
    Signal,
    WEIGHTS,
    detect_anger_words,
    detect_very_negative_words,
    detect_frustration_words,
    detect_all_caps,
    detect_excessive_punctuation,
    detect_personal_attacks,
    detect_mockery_caps,
    detect_angry_emojis,
    detect_sarcastic_emojis,
    detect_pronoun_insults,
    detect_repetition,
)

ANGER = "anger"
FRUSTRATION = "frustration"
NEUTRAL = "neutral"

__all__ = [
    "ANGER",
    "FRUSTRATION",
    "NEUTRAL",
    "WEIGHTS",
    "ScoreCard",
    "classify_emotion",
    "score_text",
]


@dataclass(frozen=True)
class ScoreCard:
    """Sensitivity-independent outcome of scoring one text."""
    score: float
    emotion: str
    reasons: tuple[str, ...]
    signals: tuple[Signal, ...] = ()

    def signal(self, name: str) -> Signal:
        for s in self.signals:
            if s.name == name:
                return s
        return Signal(name=name)

    @property
    def anger_count(self) -> int:
        return self.signal("anger_words").count

    @property
    def very_negative_count(self) -> int:
        return self.signal("very_negative").count

    @property
    def frustration_count(self) -> int:
        return self.signal("frustration").count

    def breakdown(self) -> dict[str, float]:
        """Contribution of every signal that moved the score."""
        return {s.name: s.contribution for s in self.signals if s.contribution}


EMPTY_SCORECARD = ScoreCard(score=0.0, emotion=NEUTRAL, reasons=())


def classify_emotion(anger_count: int, very_negative_count: int, frustration_count: int) -> str:
    """Informational label. Does not take part in the decision."""
    if anger_count > 0 or very_negative_count > 0:
        return ANGER
    if frustration_count > 0:
        return FRUSTRATION
    return NEUTRAL


def score_text(text: str, word_lists: WordLists) -> ScoreCard:
    """
    Score a text against the given word lists.

    Empty or whitespace-only text short-circuits to a neutral zero score
    without running any extractor.
    """
    if not text or not text.strip():
        return EMPTY_SCORECARD

    anger = detect_anger_words(text, word_lists)
    very_negative = detect_very_negative_words(text, word_lists)
    signals = (
        anger,
        very_negative,
        detect_frustration_words(text, word_lists),
        detect_all_caps(text),
        detect_excessive_punctuation(text),
        detect_personal_attacks(text, word_lists),
        detect_mockery_caps(text),
        detect_angry_emojis(text),
        detect_sarcastic_emojis(text, anger.count + very_negative.count),
        detect_pronoun_insults(text, word_lists),
        detect_repetition(text, word_lists),
    )

    score = float(sum(s.contribution for s in signals))
    reasons = tuple(reason for s in signals for reason in s.reasons)
    emotion = classify_emotion(
        anger.count, very_negative.count, signals[2].count,
    )
    return ScoreCard(score=score, emotion=emotion, reasons=reasons, signals=signals)
