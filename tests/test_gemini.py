"""
Tests for the Gemini toxicity classifier, circuit breaker, and factory.

The Gemini client is replaced with a mock; no network calls are made.
"""

import asyncio
import json
import time

import pytest
from unittest.mock import AsyncMock, MagicMock

from eumenides.classifiers import CallableClassifier, ClassifierError, as_classifier
from eumenides.classifiers.factory import get_classifier
from eumenides.classifiers.gemini import (
    CircuitBreaker,
    CircuitOpenError,
    GeminiToxicityClassifier,
    parse_probabilities,
)
from eumenides.detector import AggressionDetector
from eumenides.hybrid import HybridDetector
from eumenides.lexicon import LexiconStore
from eumenides.schemas.dictionary import LanguageDictionary
from eumenides.schemas.verdict import ToxicityVerdict, verdict_from_probabilities


def _classifier_with_reply(*replies):
    classifier = GeminiToxicityClassifier(api_key="test-key", model="test-model")
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        side_effect=[
            r if isinstance(r, Exception) else MagicMock(text=r) for r in replies
        ],
    )
    classifier._client = client
    return classifier, client


async def _hang(**kwargs):
    await asyncio.sleep(10)


# ============================================================
# VERDICTS
# ============================================================

class TestVerdicts:

    def test_threshold_rule(self):
        verdict = verdict_from_probabilities({"insult": 0.92, "threat": 0.4, "toxicity": 0.75})
        assert verdict.is_toxic is True
        assert verdict.categories == ("insult", "toxicity")
        assert verdict.confidence == 0.92
        assert verdict.labels["threat"] == 0.4

    def test_nothing_matches(self):
        verdict = verdict_from_probabilities({"insult": 0.3})
        assert verdict.is_toxic is False
        assert verdict.confidence == 0.0
        assert verdict.categories == ()

    def test_probabilities_clamped(self):
        verdict = verdict_from_probabilities({"insult": 1.7, "threat": "junk"})
        assert verdict.confidence == 1.0
        assert "threat" not in verdict.labels

    def test_coerce_legacy_keys(self):
        verdict = ToxicityVerdict.coerce(
            {"isToxic": True, "confidence": 2, "toxicCategories": ["obscene"]},
        )
        assert verdict.is_toxic is True
        assert verdict.confidence == 1.0
        assert verdict.categories == ("obscene",)

    def test_coerce_passthrough(self):
        verdict = ToxicityVerdict(is_toxic=False)
        assert ToxicityVerdict.coerce(verdict) is verdict


# ============================================================
# PARSING
# ============================================================

class TestParseProbabilities:

    def test_flat_object(self):
        probs = parse_probabilities('{"insult": 0.9, "threat": 0.1, "unknown": 0.99}')
        assert probs == {"threat": 0.1, "insult": 0.9}

    def test_nested_labels(self):
        probs = parse_probabilities('{"labels": {"toxicity": 0.8}}')
        assert probs == {"toxicity": 0.8}

    def test_markdown_fence(self):
        raw = '```json\n{"obscene": 0.7}\n```'
        assert parse_probabilities(raw) == {"obscene": 0.7}

    def test_invalid_json(self):
        with pytest.raises(ClassifierError):
            parse_probabilities("not json")

    def test_non_object(self):
        with pytest.raises(ClassifierError):
            parse_probabilities("[0.1, 0.2]")


# ============================================================
# CLASSIFIER
# ============================================================

class TestGeminiClassifier:

    @pytest.mark.asyncio
    async def test_predict(self):
        reply = json.dumps({"toxicity": 0.85, "insult": 0.9, "threat": 0.05})
        classifier, client = _classifier_with_reply(reply)
        verdict = await classifier.predict("you are an idiot")
        assert verdict.is_toxic is True
        assert verdict.confidence == 0.9
        assert verdict.categories == ("toxicity", "insult")

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert "you are an idiot" in kwargs["contents"]

    @pytest.mark.asyncio
    async def test_custom_threshold(self):
        classifier, _ = _classifier_with_reply('{"insult": 0.6}')
        classifier._threshold = 0.5
        assert (await classifier.predict("meh")).is_toxic is True

    @pytest.mark.asyncio
    async def test_empty_response_raises(self):
        classifier, _ = _classifier_with_reply("")
        with pytest.raises(ClassifierError):
            await classifier.predict("hello")

    @pytest.mark.asyncio
    async def test_single_attempt(self):
        classifier, client = _classifier_with_reply(RuntimeError("503"), '{"insult": 0.9}')
        with pytest.raises(RuntimeError):
            await classifier.predict("hello")
        assert client.aio.models.generate_content.call_count == 1

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        classifier = GeminiToxicityClassifier(api_key="")
        classifier._api_key = ""
        with pytest.raises(ClassifierError):
            await classifier.predict("hello")

    @pytest.mark.asyncio
    async def test_circuit_opens_after_failures(self):
        classifier, client = _classifier_with_reply(
            RuntimeError("1"), RuntimeError("2"), RuntimeError("3"),
        )
        for _ in range(3):
            with pytest.raises(RuntimeError):
                await classifier.predict("hello")
        assert classifier.circuit_breaker.is_open
        with pytest.raises(CircuitOpenError):
            await classifier.predict("hello")
        assert client.aio.models.generate_content.call_count == 3

    @pytest.mark.asyncio
    async def test_success_resets_failures(self):
        classifier, _ = _classifier_with_reply(
            RuntimeError("1"), RuntimeError("2"), '{"insult": 0.1}', RuntimeError("3"),
        )
        for _ in range(2):
            with pytest.raises(RuntimeError):
                await classifier.predict("hello")
        await classifier.predict("hello")
        with pytest.raises(RuntimeError):
            await classifier.predict("hello")
        assert not classifier.circuit_breaker.is_open

    @pytest.mark.asyncio
    async def test_cancelled_call_counts_as_failure(self):
        classifier, client = _classifier_with_reply()
        client.aio.models.generate_content = AsyncMock(side_effect=_hang)
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(classifier.predict("hello"), timeout=0.01)
        assert classifier.circuit_breaker._failures == 1

    @pytest.mark.asyncio
    async def test_hanging_model_opens_circuit(self):
        classifier, client = _classifier_with_reply()
        client.aio.models.generate_content = AsyncMock(side_effect=_hang)
        store = LexiconStore([LanguageDictionary(code="en", anger_words=["stupid"])])
        hybrid = HybridDetector(AggressionDetector(store), classifier)

        for _ in range(3):
            result = await hybrid.classify("this is stupid", timeout=0.01)
            assert result.fallback_reason == "Secondary classifier timed out"
        assert classifier.circuit_breaker.is_open

        result = await hybrid.classify("this is stupid", timeout=0.01)
        assert "circuit breaker is open" in result.fallback_reason
        assert client.aio.models.generate_content.call_count == 3

    def test_status(self):
        classifier = GeminiToxicityClassifier(api_key="k", model="m")
        assert classifier.status() == {
            "name": "gemini",
            "model": "m",
            "configured": True,
            "circuit": "closed",
        }


class TestCircuitBreaker:

    def test_half_open_after_recovery(self):
        breaker = CircuitBreaker(failure_threshold=1, recovery_timeout=60)
        breaker.record_failure()
        assert breaker.state == "open"
        breaker._last_failure_time = time.monotonic() - 61
        assert breaker.state == "half-open"
        assert not breaker.is_open

    def test_success_closes(self):
        breaker = CircuitBreaker(failure_threshold=1)
        breaker.record_failure()
        breaker.record_success()
        assert breaker.state == "closed"


# ============================================================
# FACTORY AND ADAPTERS
# ============================================================

class TestFactory:

    @pytest.mark.parametrize("name", ["none", "", "NONE"])
    def test_no_classifier(self, name):
        assert get_classifier(name) is None

    def test_gemini(self):
        assert isinstance(get_classifier("gemini"), GeminiToxicityClassifier)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_classifier("tensorflow")


class TestCallableClassifier:

    @pytest.mark.asyncio
    async def test_async_function(self):
        async def predict(text):
            return ToxicityVerdict(is_toxic=True, confidence=0.8)

        verdict = await CallableClassifier(predict).predict("x")
        assert verdict.confidence == 0.8

    @pytest.mark.asyncio
    async def test_sync_function_mapping(self):
        verdict = await CallableClassifier(lambda t: {"isToxic": False}).predict("x")
        assert verdict.is_toxic is False

    def test_as_classifier(self):
        assert as_classifier(None) is None

        def scorer(text):
            return {}

        wrapped = as_classifier(scorer)
        assert wrapped.name == "scorer"
        assert as_classifier(wrapped) is wrapped
