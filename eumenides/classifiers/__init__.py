"""
Toxicity Classifier — Abstract Interface

The hybrid combiner consults a secondary classifier only through this
interface, so the core never imports an inference framework. Swap
backends by changing EUMENIDES_CLASSIFIER in env, or pass any async
function to CallableClassifier.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from eumenides.schemas.verdict import ToxicityVerdict


class ClassifierError(Exception):
    """Raised when a secondary classifier cannot produce a verdict."""


class ToxicityClassifier(ABC):
    """Abstract base for secondary toxicity classifiers."""

    name: str = "custom"

    @abstractmethod
    async def predict(self, text: str) -> ToxicityVerdict:
        """Return a verdict for the text. May raise; callers fall back."""
        ...

    def status(self) -> dict:
        return {"name": self.name}


class CallableClassifier(ToxicityClassifier):
    """
    Adapts a plain function into a classifier.

    The function receives the text and returns a ToxicityVerdict or a
    verdict-shaped mapping ({"isToxic": ..., "confidence": ...,
    "categories": [...]}). Both sync and async functions are accepted.
    """

    def __init__(
        self,
        func: Callable[[str], Any | Awaitable[Any]],
        name: str = "callable",
    ):
        self._func = func
        self.name = name

    async def predict(self, text: str) -> ToxicityVerdict:
        raw = self._func(text)
        if inspect.isawaitable(raw):
            raw = await raw
        return ToxicityVerdict.coerce(raw)


def as_classifier(candidate) -> ToxicityClassifier | None:
    """Wrap a bare callable; pass classifiers and None through."""
    if candidate is None or isinstance(candidate, ToxicityClassifier):
        return candidate
    if callable(candidate):
        return CallableClassifier(candidate, name=getattr(candidate, "__name__", "callable"))
    raise TypeError(f"Not a toxicity classifier: {candidate!r}")


__all__ = [
    "ClassifierError",
    "ToxicityClassifier",
    "CallableClassifier",
    "as_classifier",
]
