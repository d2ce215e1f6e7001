"""
Gemini Classifier — LLM-backed toxicity scoring via Google Gemini.

Uses the google.genai SDK. Client is lazily initialized —
the package loads without an API key and only fails on an actual call.

The model is asked for per-label toxic probabilities, which are turned
into a ToxicityVerdict with the same threshold rule a local model would
use (verdict_from_probabilities).

Features:
- Single attempt per prediction; the hybrid path falls back on failure
- Circuit breaker: after consecutive failures, fail fast for 60s
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Optional

from google import genai
from google.genai import types

from eumenides.classifiers import ClassifierError, ToxicityClassifier
from eumenides.config import settings
from eumenides.schemas.verdict import (
    TOXICITY_LABELS,
    ToxicityVerdict,
    verdict_from_probabilities,
)

logger = logging.getLogger("eumenides.classifiers.gemini")

# Circuit breaker settings
_CB_FAILURE_THRESHOLD = 3   # Open after this many consecutive failures
_CB_RECOVERY_TIMEOUT = 60   # Seconds before trying again (half-open)


TOXICITY_PROMPT = """You are a content moderation classifier for social media posts.

Rate the post below for each label with the probability (0.0 to 1.0) that
the label applies:
{labels}

Judge the post as written. Quoting, negation ("not stupid") and friendly
banter lower the probabilities; direct insults, threats and slurs raise them.

## Post
{text}

Return ONLY valid JSON: an object mapping every label above to its probability."""


class CircuitBreaker:
    """Simple circuit breaker: closed → open → half-open → closed.

    When open, predict() raises CircuitOpenError immediately so the
    hybrid path can fall back to rule-based scoring instead of waiting
    for the model to time out.
    """

    def __init__(
        self,
        failure_threshold: int = _CB_FAILURE_THRESHOLD,
        recovery_timeout: float = _CB_RECOVERY_TIMEOUT,
    ):
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self._failures = 0
        self._last_failure_time: float = 0
        self._state = "closed"  # closed | open | half-open

    @property
    def state(self) -> str:
        if self._state == "open":
            if time.monotonic() - self._last_failure_time >= self.recovery_timeout:
                self._state = "half-open"
        return self._state

    def record_success(self) -> None:
        self._failures = 0
        self._state = "closed"

    def record_failure(self) -> None:
        self._failures += 1
        self._last_failure_time = time.monotonic()
        if self._failures >= self.failure_threshold:
            self._state = "open"
            logger.warning(
                "Circuit breaker OPEN — %d consecutive classifier failures. "
                "Rule-only mode for %ds.",
                self._failures, self.recovery_timeout,
                extra={"classifier": "gemini"},
            )

    @property
    def is_open(self) -> bool:
        return self.state == "open"


class CircuitOpenError(ClassifierError):
    """Raised when the circuit breaker is open."""


def parse_probabilities(raw: str) -> dict[str, float]:
    """Parse the model's JSON reply into {label: probability}."""
    # Strip markdown fences if the model wraps JSON in ```json blocks
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[-1].rsplit("```", 1)[0].strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ClassifierError(
            f"Model returned invalid JSON: {e}. Raw response: {raw[:300]}"
        ) from e

    if isinstance(data, dict) and isinstance(data.get("labels"), dict):
        data = data["labels"]
    if not isinstance(data, dict):
        raise ClassifierError(f"Expected a JSON object, got {type(data).__name__}")

    return {
        label: data[label]
        for label in TOXICITY_LABELS
        if isinstance(data.get(label), (int, float))
    }


class GeminiToxicityClassifier(ToxicityClassifier):
    """Google Gemini toxicity classifier with a circuit breaker."""

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        threshold: Optional[float] = None,
    ):
        self._api_key = api_key or settings.GEMINI_API_KEY
        self._model = model or settings.GEMINI_MODEL
        self._threshold = settings.TOXICITY_THRESHOLD if threshold is None else threshold
        self._client: Optional[genai.Client] = None
        self.circuit_breaker = CircuitBreaker()

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise ClassifierError(
                    "GEMINI_API_KEY not set. Get one from "
                    "https://aistudio.google.com/apikey"
                )
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def _call_model(self, prompt: str) -> str:
        client = self._get_client()
        config = types.GenerateContentConfig(
            temperature=0.0,
            response_mime_type="application/json",
        )
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=config,
        )
        if not response.text:
            raise ClassifierError("Model returned an empty response")
        return response.text

    async def predict(self, text: str) -> ToxicityVerdict:
        # Fast-fail while the model is known to be down
        if self.circuit_breaker.is_open:
            raise CircuitOpenError(
                "Classifier circuit breaker is open — too many consecutive failures."
            )

        prompt = TOXICITY_PROMPT.format(
            labels="\n".join(f"- {label}" for label in TOXICITY_LABELS),
            text=text,
        )
        try:
            raw = await self._call_model(prompt)
            probabilities = parse_probabilities(raw)
        except (Exception, asyncio.CancelledError):
            # A cancelled call is a model that did not answer in time
            self.circuit_breaker.record_failure()
            raise

        self.circuit_breaker.record_success()
        return verdict_from_probabilities(probabilities, self._threshold)

    def status(self) -> dict:
        return {
            "name": self.name,
            "model": self._model,
            "configured": bool(self._api_key),
            "circuit": self.circuit_breaker.state,
        }
