"""
Hybrid Detector — Rules First, Secondary Classifier for Borderline Text

Flow per call:
  1. Rule pass (AggressionDetector.classify).
  2. Fast path: score >= 6 is clearly aggressive, score <= 0 clearly
     clean. The rule result is returned as-is.
  3. Borderline: ask the secondary classifier (cached, time-bounded,
     single attempt) and blend:

         hybrid = ml_score * 0.6 + rule_score * 0.4
         ml_score   = confidence * 10 when the verdict is toxic, else 0
         rule_score = min(raw_score / 1.5, 10)

     The blend is compared against HYBRID_THRESHOLDS, a separate table
     from the rule thresholds.

Any classifier failure (missing, error, timeout, bad verdict) degrades to
the rule result with a fallback_reason. classify() never raises.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from eumenides.cache import PredictionCache
from eumenides.classifiers import ToxicityClassifier, as_classifier
from eumenides.config import settings
from eumenides.detector import AggressionDetector, AnalysisResult
from eumenides.schemas.verdict import ToxicityVerdict
from eumenides.sensitivity import DEFAULT_SENSITIVITY, DEFAULT_TIER, resolve_sensitivity

logger = logging.getLogger(__name__)


# Rule scores outside (FAST_PATH_LOWER, FAST_PATH_UPPER) skip the classifier
FAST_PATH_UPPER = 6
FAST_PATH_LOWER = 0

ML_WEIGHT = 0.6
RULE_WEIGHT = 0.4
RULE_SCALE = 1.5
SCALE_MAX = 10

HYBRID_THRESHOLDS = MappingProxyType({
    "maximum": 0.5,
    "high": 2,
    "medium-high": 3,
    "medium": 4,
    "medium-low": 5,
    "low": 6,
    "minimal": 7,
})
HYBRID_DEFAULT_THRESHOLD = 4

NO_CLASSIFIER = "No secondary classifier configured"


@dataclass(frozen=True)
class HybridResult:
    """Rule result, optionally blended with a secondary verdict."""
    is_aggressive: bool
    score: float
    emotion: str
    reasons: tuple[str, ...]
    sensitivity: str
    ml_used: bool = False
    fast_path: bool = False
    fallback_reason: Optional[str] = None
    rule_score: float = 0.0
    ml_score: Optional[float] = None
    ml_confidence: Optional[float] = None
    ml_categories: tuple[str, ...] = ()
    detected_by: str = "none"

    def to_dict(self) -> dict:
        return {
            "is_aggressive": self.is_aggressive,
            "score": self.score,
            "emotion": self.emotion,
            "reasons": list(self.reasons),
            "sensitivity": self.sensitivity,
            "ml_used": self.ml_used,
            "fast_path": self.fast_path,
            "fallback_reason": self.fallback_reason,
            "rule_score": self.rule_score,
            "ml_score": self.ml_score,
            "ml_confidence": self.ml_confidence,
            "ml_categories": list(self.ml_categories),
            "detected_by": self.detected_by,
        }


def needs_secondary(score: float) -> bool:
    """Borderline band: strictly between the fast-path bounds."""
    return FAST_PATH_LOWER < score < FAST_PATH_UPPER


def hybrid_threshold(sensitivity) -> float:
    return HYBRID_THRESHOLDS.get(resolve_sensitivity(sensitivity), HYBRID_DEFAULT_THRESHOLD)


def scale_rule_score(score: float) -> float:
    return min(score / RULE_SCALE, SCALE_MAX)


def detection_source(verdict: ToxicityVerdict, rule_result: AnalysisResult) -> str:
    if verdict.is_toxic and rule_result.is_aggressive:
        return "both"
    if verdict.is_toxic:
        return "ml"
    if rule_result.is_aggressive:
        return "rules"
    return "none"


def rule_only(
    rule_result: AnalysisResult,
    sensitivity: str,
    fast_path: bool = False,
    fallback_reason: Optional[str] = None,
) -> HybridResult:
    """Rule result wrapped unchanged, for the fast path and for fallbacks."""
    return HybridResult(
        is_aggressive=rule_result.is_aggressive,
        score=rule_result.score,
        emotion=rule_result.emotion,
        reasons=rule_result.reasons,
        sensitivity=sensitivity,
        fast_path=fast_path,
        fallback_reason=fallback_reason,
        rule_score=scale_rule_score(rule_result.score),
        detected_by="rules" if rule_result.is_aggressive else "none",
    )


def combine(
    verdict: ToxicityVerdict,
    rule_result: AnalysisResult,
    sensitivity: str = DEFAULT_SENSITIVITY,
) -> HybridResult:
    """Blend a secondary verdict with the rule result. Pure."""
    ml_score = verdict.confidence * SCALE_MAX if verdict.is_toxic else 0.0
    rule_score = scale_rule_score(rule_result.score)
    hybrid_score = ml_score * ML_WEIGHT + rule_score * RULE_WEIGHT
    is_aggressive = hybrid_score >= hybrid_threshold(sensitivity)

    reasons = rule_result.reasons
    if verdict.is_toxic:
        categories = verdict.categories or ("toxicity",)
        reasons = reasons + (f"ML detected: {', '.join(categories)}",)

    return HybridResult(
        is_aggressive=is_aggressive,
        score=hybrid_score,
        emotion=rule_result.emotion,
        reasons=reasons,
        sensitivity=sensitivity,
        ml_used=True,
        rule_score=rule_score,
        ml_score=ml_score,
        ml_confidence=verdict.confidence,
        ml_categories=verdict.categories,
        detected_by=detection_source(verdict, rule_result) if is_aggressive else "none",
    )


class HybridDetector:
    """
    Wraps an AggressionDetector with an optional secondary classifier.

    The classifier may be a ToxicityClassifier, any sync/async callable
    returning a verdict-shaped value, or None (always rule-only).
    """

    def __init__(
        self,
        detector: AggressionDetector,
        classifier=None,
        cache: Optional[PredictionCache] = None,
        enable_cache: bool = True,
        timeout: Optional[float] = None,
    ):
        self._detector = detector
        self._classifier: Optional[ToxicityClassifier] = as_classifier(classifier)
        if cache is None and enable_cache:
            cache = PredictionCache()
        self._cache = cache
        self._timeout = settings.HYBRID_TIMEOUT if timeout is None else timeout

    @property
    def detector(self) -> AggressionDetector:
        return self._detector

    @property
    def classifier(self) -> Optional[ToxicityClassifier]:
        return self._classifier

    async def classify(
        self,
        text: Optional[str],
        sensitivity: str = DEFAULT_SENSITIVITY,
        tier: str = DEFAULT_TIER,
        timeout: Optional[float] = None,
    ) -> HybridResult:
        rule_result = self._detector.classify(text, sensitivity, tier)

        if not needs_secondary(rule_result.score):
            return rule_only(rule_result, sensitivity, fast_path=True)

        if self._classifier is None:
            return rule_only(rule_result, sensitivity, fallback_reason=NO_CLASSIFIER)

        start = time.monotonic()
        try:
            verdict = await self._predict(text, self._timeout if timeout is None else timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Secondary classifier timed out, using rule result",
                extra={"classifier": self._classifier.name, "error_type": "TimeoutError"},
            )
            return rule_only(
                rule_result, sensitivity, fallback_reason="Secondary classifier timed out",
            )
        except Exception as e:
            logger.warning(
                "Secondary classifier failed, using rule result: %s", e,
                extra={
                    "classifier": self._classifier.name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return rule_only(rule_result, sensitivity, fallback_reason=str(e) or type(e).__name__)

        result = combine(verdict, rule_result, sensitivity)
        logger.debug(
            "Hybrid decision: score=%.3f aggressive=%s",
            result.score, result.is_aggressive,
            extra={
                "score": result.score,
                "sensitivity": sensitivity,
                "tier": tier,
                "is_aggressive": result.is_aggressive,
                "detected_by": result.detected_by,
                "classifier": self._classifier.name,
                "duration_ms": round((time.monotonic() - start) * 1000, 2),
            },
        )
        return result

    async def _predict(self, text: str, timeout: float) -> ToxicityVerdict:
        """Cached, time-bounded single prediction. Raises on any failure."""
        if self._cache is not None:
            cached = await self._cache.get(text)
            if cached is not None:
                logger.debug(
                    "Prediction cache hit",
                    extra={"cache_hit": True, "classifier": self._classifier.name},
                )
                return cached

        raw = await asyncio.wait_for(self._classifier.predict(text), timeout=timeout)
        verdict = ToxicityVerdict.coerce(raw)

        if self._cache is not None:
            await self._cache.put(text, verdict)
        return verdict

    def status(self) -> dict:
        return {
            "classifier": self._classifier.status() if self._classifier else None,
            "configured": self._classifier is not None,
            "timeout": self._timeout,
            "cache": self._cache.stats if self._cache is not None else None,
        }

    async def clear_cache(self) -> None:
        if self._cache is not None:
            await self._cache.clear()
