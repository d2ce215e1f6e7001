"""
Signal Extractors — Independent Aggression Indicators

Each extractor scans a text for ONE indicator and returns a Signal:
how many times it fired, what it contributes to the aggression score,
and the human-readable reason(s) to report. Extractors share nothing
but the merged word lists and are purely additive.

Weights (points per hit):
  - Anger word:           +2   (negated anger word: -0.5)
  - Very negative word:   +3
  - Frustration word:     +1
  - ALL CAPS (>50%):      +2   once
  - !!! / ??? runs:       +1   once
  - Personal attack:      +3   per @mention with a negative word nearby
  - Mockery caps:         +2   once (aLtErNaTiNg case)
  - Angry emoji:          +2   each, at most 3 counted
  - Sarcastic emoji:      +1   each, at most 2 counted, only with negative words
  - Pronoun + insult:     +3   per hit, unbounded
  - Repetition:           +1   per extra occurrence of a negative word

Word and phrase lookups are whole-word and case-insensitive. The caps
detectors look at the text as typed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from eumenides.lexicon import WordLists, word_pattern


# ============================================================
# WEIGHTS
# ============================================================

WEIGHTS = MappingProxyType({
    "anger_word": 2,
    "negated_anger_word": -0.5,
    "very_negative": 3,
    "frustration": 1,
    "all_caps": 2,
    "excessive_punctuation": 1,
    "personal_attack": 3,
    "mockery_caps": 2,
    "angry_emoji": 2,
    "sarcastic_emoji": 1,
    "pronoun_insult": 3,
    "repetition": 1,
})


# ============================================================
# CLOSED TOKEN SETS
# ============================================================

NEGATION_WORDS: dict[str, tuple[str, ...]] = {
    "en": (
        "not", "no", "never", "isn't", "wasn't", "doesn't", "won't",
        "don't", "didn't", "cannot", "can't", "shouldn't", "wouldn't",
        "couldn't",
    ),
    "fr": ("pas", "non", "jamais", "n'est", "n'était", "ne", "aucun", "aucune", "ni"),
}

PERSONAL_PRONOUNS: dict[str, tuple[str, ...]] = {
    "en": ("you", "your", "you're", "yours", "you've", "you'll", "u", "ur"),
    "fr": ("tu", "vous", "ton", "ta", "tes", "votre", "vos", "toi"),
}

ALL_NEGATIONS: tuple[str, ...] = tuple(
    dict.fromkeys(w.lower() for words in NEGATION_WORDS.values() for w in words)
)
ALL_PRONOUNS: tuple[str, ...] = tuple(
    dict.fromkeys(w.lower() for words in PERSONAL_PRONOUNS.values() for w in words)
)

ANGRY_EMOJIS: tuple[str, ...] = ("😡", "🤬", "😠", "💢", "🖕", "😤", "👎", "🤮", "💩", "🔥")
SARCASTIC_EMOJIS: tuple[str, ...] = ("🙄", "😏", "🤡", "💀")

# Windows and caps
NEGATION_WINDOW = 30        # chars looked at before an anger word
NEGATION_MAX_WORDS = 3      # words allowed between negation and anger word
MENTION_WINDOW = 50         # chars either side of an @mention
PRONOUN_WINDOW = 50         # chars scanned from a pronoun onwards
PRONOUN_MAX_WORDS = 5
CAPS_MIN_LETTERS = 10
CAPS_RATIO = 0.5
ANGRY_EMOJI_CAP = 3
SARCASTIC_EMOJI_CAP = 2


# Longest first so "n'est" wins over "ne" at the same position
_NEGATION_RE = re.compile(
    r"(?<!\w)(?:"
    + "|".join(re.escape(w) for w in sorted(ALL_NEGATIONS, key=len, reverse=True))
    + r")(?!\w)"
)
_PRONOUN_RES = tuple(word_pattern(p) for p in ALL_PRONOUNS)
_LETTER_RE = re.compile(r"[a-zA-ZÀ-ÖØ-öø-ÿ]")
_UPPER_RE = re.compile(r"[A-ZÀ-ÖØ-Þ]")
_PUNCTUATION_RE = re.compile(r"[!?]{3,}")
_MENTION_RE = re.compile(r"@\w+")
_MOCKERY_RE = re.compile(r"(?:[a-z][A-Z]){3,}|(?:[A-Z][a-z]){3,}")


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class Signal:
    """Output of one extractor."""
    name: str
    count: int = 0
    contribution: float = 0
    reasons: tuple[str, ...] = ()

    @property
    def fired(self) -> bool:
        return bool(self.reasons)


# ============================================================
# HELPERS
# ============================================================

def contains_word(text: str, word: str) -> bool:
    """True if the lowercase word/phrase appears delimited in lowercase text."""
    return word_pattern(word).search(text) is not None


def is_negated(lowered: str, index: int) -> bool:
    """
    True if a negation token closes within NEGATION_WINDOW chars before
    index with at most NEGATION_MAX_WORDS words between it and index.
    """
    before = lowered[max(0, index - NEGATION_WINDOW):index]
    last = None
    for last in _NEGATION_RE.finditer(before):
        pass
    if last is None:
        return False
    return len(before[last.end():].split()) <= NEGATION_MAX_WORDS


# ============================================================
# EXTRACTORS
# ============================================================

def detect_anger_words(text: str, word_lists: WordLists) -> Signal:
    """1. Whole-word anger matches. Negated matches subtract instead of add."""
    lowered = text.lower()
    hits = negated = 0
    for word in word_lists.anger:
        for match in word_pattern(word).finditer(lowered):
            if is_negated(lowered, match.start()):
                negated += 1
            else:
                hits += 1

    reasons = []
    if hits:
        reasons.append(f"anger words ({hits})")
    if negated:
        reasons.append(f"negated anger words ({negated})")
    return Signal(
        name="anger_words",
        count=hits,
        contribution=WEIGHTS["anger_word"] * hits + WEIGHTS["negated_anger_word"] * negated,
        reasons=tuple(reasons),
    )


def detect_very_negative_words(text: str, word_lists: WordLists) -> Signal:
    """2. One count per distinct very-negative word present. Not negation-aware."""
    lowered = text.lower()
    count = sum(1 for word in word_lists.very_negative if contains_word(lowered, word))
    return Signal(
        name="very_negative",
        count=count,
        contribution=WEIGHTS["very_negative"] * count,
        reasons=(f"very negative ({count})",) if count else (),
    )


def detect_frustration_words(text: str, word_lists: WordLists) -> Signal:
    """3. One count per distinct frustration word present."""
    lowered = text.lower()
    count = sum(1 for word in word_lists.frustration if contains_word(lowered, word))
    return Signal(
        name="frustration",
        count=count,
        contribution=WEIGHTS["frustration"] * count,
        reasons=(f"frustration ({count})",) if count else (),
    )


def detect_all_caps(text: str, word_lists: Optional[WordLists] = None) -> Signal:
    """4. Shouting: more than half of 11+ letters are uppercase."""
    letters = len(_LETTER_RE.findall(text))
    if letters <= CAPS_MIN_LETTERS:
        return Signal(name="all_caps")
    upper = len(_UPPER_RE.findall(text))
    if upper / letters <= CAPS_RATIO:
        return Signal(name="all_caps")
    return Signal(
        name="all_caps", count=1,
        contribution=WEIGHTS["all_caps"], reasons=("excessive caps",),
    )


def detect_excessive_punctuation(text: str, word_lists: Optional[WordLists] = None) -> Signal:
    """5. Any run of 3+ '!' / '?' characters, counted once."""
    if not _PUNCTUATION_RE.search(text):
        return Signal(name="excessive_punctuation")
    return Signal(
        name="excessive_punctuation", count=1,
        contribution=WEIGHTS["excessive_punctuation"],
        reasons=("excessive punctuation",),
    )


def detect_personal_attacks(text: str, word_lists: WordLists) -> Signal:
    """6. @mentions with an anger/very-negative word within MENTION_WINDOW chars."""
    negative = word_lists.negative
    count = 0
    for mention in _MENTION_RE.finditer(text):
        window = text[
            max(0, mention.start() - MENTION_WINDOW):mention.end() + MENTION_WINDOW
        ].lower()
        if any(contains_word(window, word) for word in negative):
            count += 1
    return Signal(
        name="personal_attack",
        count=count,
        contribution=WEIGHTS["personal_attack"] * count,
        reasons=(f"personal attack ({count})",) if count else (),
    )


def detect_mockery_caps(text: str, word_lists: Optional[WordLists] = None) -> Signal:
    """7. aLtErNaTiNg case: three or more consecutive case flips."""
    if not _MOCKERY_RE.search(text):
        return Signal(name="mockery_caps")
    return Signal(
        name="mockery_caps", count=1,
        contribution=WEIGHTS["mockery_caps"], reasons=("mockery caps",),
    )


def detect_angry_emojis(text: str, word_lists: Optional[WordLists] = None) -> Signal:
    """8. Angry emoji, weight applied to at most ANGRY_EMOJI_CAP of them."""
    count = sum(text.count(emoji) for emoji in ANGRY_EMOJIS)
    return Signal(
        name="angry_emoji",
        count=count,
        contribution=WEIGHTS["angry_emoji"] * min(count, ANGRY_EMOJI_CAP),
        reasons=(f"angry emojis ({count})",) if count else (),
    )


def detect_sarcastic_emojis(text: str, negative_hits: int) -> Signal:
    """9. Sarcastic emoji. Only scored when negative words were already found."""
    count = sum(text.count(emoji) for emoji in SARCASTIC_EMOJIS)
    if not count or negative_hits <= 0:
        return Signal(name="sarcastic_emoji", count=count)
    return Signal(
        name="sarcastic_emoji",
        count=count,
        contribution=WEIGHTS["sarcastic_emoji"] * min(count, SARCASTIC_EMOJI_CAP),
        reasons=(f"sarcastic emojis ({count})",),
    )


def detect_pronoun_insults(text: str, word_lists: WordLists) -> Signal:
    """
    10. A personal pronoun followed, within PRONOUN_WINDOW chars and
    PRONOUN_MAX_WORDS words, by an anger/very-negative word.

    Every pronoun occurrence counts on its own ("you ... you ...").
    Overlapping pronoun forms at the same position ("you" / "you're")
    are one occurrence.
    """
    lowered = text.lower()
    negative = word_lists.negative
    starts = sorted({m.start() for pattern in _PRONOUN_RES for m in pattern.finditer(lowered)})

    count = 0
    for start in starts:
        after = lowered[start:start + PRONOUN_WINDOW]
        for word in negative:
            hit = word_pattern(word).search(after)
            if hit and len(after[:hit.start()].split()) <= PRONOUN_MAX_WORDS:
                count += 1
                break

    return Signal(
        name="pronoun_insult",
        count=count,
        contribution=WEIGHTS["pronoun_insult"] * count,
        reasons=(f"direct insults ({count})",) if count else (),
    )


def detect_repetition(text: str, word_lists: WordLists) -> Signal:
    """11. Every extra whole-word occurrence of a negative word adds one."""
    lowered = text.lower()
    tally = 0
    for word in word_lists.negative:
        occurrences = sum(1 for _ in word_pattern(word).finditer(lowered))
        if occurrences > 1:
            tally += occurrences - 1
    return Signal(
        name="repetition",
        count=tally,
        contribution=WEIGHTS["repetition"] * tally,
        reasons=(f"repetition ({tally})",) if tally else (),
    )
