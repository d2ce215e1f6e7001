"""
Tests for the aggression detector: end-to-end scenarios and the
properties classification must hold under any input.
"""

import pytest

from eumenides.detector import (
    NEUTRAL_RESULT,
    AggressionDetector,
    AnalysisResult,
    classify,
    explain,
    get_detector,
)
from eumenides.dictionaries import build_default_store
from eumenides.lexicon import LexiconStore
from eumenides.schemas.dictionary import LanguageDictionary
from eumenides.sensitivity import THRESHOLDS


SAMPLE_TEXTS = [
    "You are all INCOMPETENT IDIOTS!!!",
    "Have a wonderful day, thank you!",
    "this is not stupid",
    "this is stupid",
    "@bob you are an idiot",
    "ugh, seriously?",
    "I hate this 😡😡",
    "sTuPiD",
    "",
]


@pytest.fixture(scope="module")
def detector():
    return AggressionDetector(build_default_store())


@pytest.fixture
def small_detector():
    store = LexiconStore([
        LanguageDictionary(
            code="en",
            anger_words=["idiot", "incompetent", "stupid", "bad"],
            very_negative_words=["hate"],
            frustration_words=["ugh"],
        ),
    ])
    return AggressionDetector(store)


# ============================================================
# SCENARIOS
# ============================================================

class TestScenarios:

    def test_insult_in_caps(self, detector):
        result = detector.classify("You are all INCOMPETENT IDIOTS!!!", "medium")
        assert result.is_aggressive is True
        assert result.emotion == "anger"
        assert result.score >= 2
        assert "anger words (1)" in result.reasons
        assert "excessive caps" in result.reasons
        assert "excessive punctuation" in result.reasons

    def test_insult_in_caps_exact_score(self, small_detector):
        result = small_detector.classify("You are all INCOMPETENT IDIOTS!!!", "medium")
        assert result == AnalysisResult(
            is_aggressive=True,
            score=8.0,
            emotion="anger",
            reasons=(
                "anger words (1)",
                "excessive caps",
                "excessive punctuation",
                "direct insults (1)",
            ),
        )

    def test_friendly_text(self, detector):
        result = detector.classify("Have a wonderful day, thank you!", "medium")
        assert result.is_aggressive is False
        assert result.score == 0
        assert result.emotion == "neutral"
        assert result.reasons == ()

    def test_negated_word_at_maximum(self, detector):
        result = detector.classify("this is not bad at all", "maximum")
        assert result.is_aggressive is False
        assert result.score < 0.5

    def test_negated_word_scores_negative(self, small_detector):
        result = small_detector.classify("this is not bad at all", "maximum")
        assert result.score == -0.5
        assert result.is_aggressive is False


# ============================================================
# PROPERTIES
# ============================================================

class TestProperties:

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_deterministic(self, detector, text):
        assert detector.classify(text, "high") == detector.classify(text, "high")

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_threshold_comparison_matches_classify(self, detector, text):
        score = detector.score(text).score
        for level, threshold in THRESHOLDS.items():
            assert detector.classify(text, level).is_aggressive == (score >= threshold)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_score_independent_of_sensitivity(self, detector, text):
        scores = {detector.classify(text, level).score for level in THRESHOLDS}
        assert len(scores) == 1

    def test_negation_dampens(self, detector):
        negated = detector.classify("this is not stupid", "medium")
        plain = detector.classify("this is stupid", "medium")
        assert negated.score < plain.score

    def test_mention_gating(self, detector):
        attack = detector.score("@bob you are an idiot")
        friendly = detector.score("@bob have a nice day")
        assert attack.signal("personal_attack").contribution == 3
        assert friendly.signal("personal_attack").contribution == 0

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_alias_equivalence(self, detector, text):
        assert detector.classify(text, "balanced") == detector.classify(text, "medium")

    @pytest.mark.parametrize("sensitivity", ["ultra", "", "MAXIMUM", None, 7])
    def test_unknown_sensitivity_behaves_like_medium(self, detector, sensitivity):
        text = "ugh, seriously?"
        assert detector.classify(text, sensitivity) == detector.classify(text, "medium")

    def test_tier_does_not_change_result(self, detector):
        text = "@bob you are an idiot"
        assert detector.classify(text, "maximum", "free") == detector.classify(
            text, "maximum", "premium"
        )

    def test_idempotent_add_word(self):
        store = build_default_store()
        store.add_word("foo", "anger")
        store.add_word("foo", "anger")
        assert store.merged_word_lists().anger.count("foo") == 1


class TestEdgeInputs:

    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    def test_neutral_result(self, detector, text):
        assert detector.classify(text) == NEUTRAL_RESULT

    def test_neutral_result_shape(self):
        assert NEUTRAL_RESULT.is_aggressive is False
        assert NEUTRAL_RESULT.score == 0
        assert NEUTRAL_RESULT.emotion == "neutral"
        assert NEUTRAL_RESULT.reasons == ()

    def test_unicode_text(self, detector):
        result = detector.classify("🤬🤬 espèce de CRÉTIN !!! 💢", "medium")
        assert result.is_aggressive is True

    def test_long_text(self, detector):
        text = "idiot " * 2000
        result = detector.classify(text, "minimal")
        assert result.is_aggressive is True

    def test_custom_word_takes_effect(self):
        detector = AggressionDetector(build_default_store())
        assert detector.classify("he is a numpty", "medium").score == 0
        detector.lexicon.add_word("numpty", "anger")
        assert detector.classify("he is a numpty", "medium").score == 2


# ============================================================
# EXPLAIN AND INTROSPECTION
# ============================================================

class TestExplain:

    def test_neutral(self):
        assert explain(NEUTRAL_RESULT) == "Content appears neutral or positive."

    def test_aggressive(self, small_detector):
        result = small_detector.classify("You are all INCOMPETENT IDIOTS!!!")
        assert explain(result) == (
            "Aggression score: 8. Detected emotion: anger. Reasons: anger words (1), "
            "excessive caps, excessive punctuation, direct insults (1)"
        )

    def test_fractional_score(self):
        result = AnalysisResult(True, 1.5, "anger", ("anger words (1)",))
        assert explain(result).startswith("Aggression score: 1.5.")

    def test_method_delegates(self, small_detector):
        assert small_detector.explain(NEUTRAL_RESULT) == explain(NEUTRAL_RESULT)

    def test_to_dict(self, small_detector):
        data = small_detector.classify("stupid").to_dict()
        assert data == {
            "is_aggressive": True,
            "score": 2.0,
            "emotion": "anger",
            "reasons": ["anger words (1)"],
        }


class TestDefaultDetector:

    def test_shared_instance(self):
        assert get_detector() is get_detector()

    def test_module_classify(self):
        assert classify("You are all INCOMPETENT IDIOTS!!!").is_aggressive is True

    def test_stats(self, detector):
        stats = detector.stats()
        assert stats["total_languages"] == 6
        assert stats["total_words"] > 0

    def test_supported_languages(self, detector):
        names = {l["code"]: l["name"] for l in detector.supported_languages()}
        assert names["fr"] == "Français"
        assert names["es"] == "Español"
