"""
Classifier factory — returns the configured secondary classifier.
"""

from typing import Optional

from eumenides.classifiers import ToxicityClassifier
from eumenides.config import settings


def get_classifier(name: Optional[str] = None) -> Optional[ToxicityClassifier]:
    """Factory — None when no secondary classifier is configured."""
    name = (name if name is not None else settings.CLASSIFIER).strip().lower()
    if name in ("", "none"):
        return None
    if name == "gemini":
        from eumenides.classifiers.gemini import GeminiToxicityClassifier
        return GeminiToxicityClassifier()
    raise ValueError(f"Unknown toxicity classifier: {name}")
