"""
Eumenides Configuration

Central settings loaded from environment variables (and a local .env).
Scoring weights and threshold tables are NOT configurable here; they are
constants of the detection engine.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    CORE_VERSION: str = "1.0.0"

    # --- Classification defaults ---
    DEFAULT_SENSITIVITY: str = os.getenv("EUMENIDES_DEFAULT_SENSITIVITY", "medium")
    DEFAULT_TIER: str = os.getenv("EUMENIDES_DEFAULT_TIER", "free")

    # --- Secondary classifier ---
    CLASSIFIER: str = os.getenv("EUMENIDES_CLASSIFIER", "none")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    TOXICITY_THRESHOLD: float = float(
        os.getenv("EUMENIDES_TOXICITY_THRESHOLD", "0.7")
    )

    # --- Hybrid path ---
    HYBRID_TIMEOUT: float = float(os.getenv("EUMENIDES_HYBRID_TIMEOUT", "5.0"))
    CACHE_TTL_SECONDS: int = int(os.getenv("EUMENIDES_CACHE_TTL", "300"))
    CACHE_MAX_ENTRIES: int = int(os.getenv("EUMENIDES_CACHE_MAX_ENTRIES", "100"))


settings = Settings()
