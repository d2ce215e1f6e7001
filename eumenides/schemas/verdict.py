"""
Toxicity Verdict Schema

The output contract of a secondary (probabilistic) toxicity classifier.
Whatever the backend (LLM, local model, remote service), the hybrid
combiner only ever sees a ToxicityVerdict.
"""

from __future__ import annotations

from typing import Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# Labels the bundled classifiers report on
TOXICITY_LABELS: tuple[str, ...] = (
    "toxicity",
    "severe_toxicity",
    "obscene",
    "threat",
    "insult",
    "identity_attack",
)


class ToxicityVerdict(BaseModel):
    """A single secondary-classifier prediction."""

    model_config = ConfigDict(frozen=True)

    is_toxic: bool = Field(
        False, validation_alias=AliasChoices("is_toxic", "isToxic"),
    )
    confidence: float = 0.0
    categories: tuple[str, ...] = Field(
        (), validation_alias=AliasChoices("categories", "toxicCategories"),
    )
    labels: dict[str, float] = Field(default_factory=dict)

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value):
        try:
            value = float(value)
        except (TypeError, ValueError):
            return 0.0
        return max(0.0, min(1.0, value))

    @classmethod
    def coerce(cls, raw) -> "ToxicityVerdict":
        """Accept a verdict or a verdict-shaped mapping. Raises ValidationError otherwise."""
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(raw)


def verdict_from_probabilities(
    probabilities: Mapping[str, float],
    threshold: float = 0.7,
) -> ToxicityVerdict:
    """
    Build a verdict from per-label toxic probabilities.

    A label matches when its probability reaches the threshold. The text is
    toxic when any label matches, and confidence is the highest matched
    probability (0 when nothing matched).
    """
    labels: dict[str, float] = {}
    matched: list[str] = []
    confidence = 0.0

    for label, prob in probabilities.items():
        try:
            prob = float(prob)
        except (TypeError, ValueError):
            continue
        prob = max(0.0, min(1.0, prob))
        labels[label] = prob
        if prob >= threshold:
            matched.append(label)
            confidence = max(confidence, prob)

    return ToxicityVerdict(
        is_toxic=bool(matched),
        confidence=confidence,
        categories=tuple(matched),
        labels=labels,
    )
