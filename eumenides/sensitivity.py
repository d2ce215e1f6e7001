"""
Sensitivity Levels and Tier Entitlements

Maps a sensitivity name to a numeric score threshold and answers which
entitlement tier unlocks which level. Pure table lookups.

Resolution never fails: aliases ("balanced", "normal", "default") map to
"medium", and an unknown name gets medium's threshold.

Tier gating is a separate query. Scoring never checks entitlement.
"""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_SENSITIVITY = "medium"
DEFAULT_TIER = "free"

# Lower threshold = more sensitive.
# medium-high and high share a threshold; maximum sits below the smallest
# single positive weight.
THRESHOLDS = MappingProxyType({
    "minimal": 5,
    "low": 4,
    "medium-low": 3,
    "medium": 2,
    "medium-high": 1,
    "high": 1,
    "maximum": 0.5,
})

SENSITIVITY_ALIASES = MappingProxyType({
    "balanced": "medium",
    "normal": "medium",
    "default": "medium",
})

# Ordered from lowest to highest; each tier's levels include the previous tier's.
TIERS: tuple[str, ...] = ("free", "basic", "premium")

SENSITIVITY_TIERS = MappingProxyType({
    "free": ("medium",),
    "basic": ("medium-low", "medium", "medium-high"),
    "premium": (
        "minimal", "low", "medium-low", "medium", "medium-high", "high", "maximum",
    ),
})


def resolve_sensitivity(name) -> str:
    """Apply the alias table. Anything else passes through unchanged."""
    if not isinstance(name, str):
        return DEFAULT_SENSITIVITY
    return SENSITIVITY_ALIASES.get(name, name)


def threshold_for(name) -> float:
    """Numeric threshold for a sensitivity name; medium's for unknown names."""
    return THRESHOLDS.get(resolve_sensitivity(name), THRESHOLDS[DEFAULT_SENSITIVITY])


def is_known(name) -> bool:
    return resolve_sensitivity(name) in THRESHOLDS


def _levels(tier) -> tuple[str, ...]:
    return SENSITIVITY_TIERS.get(tier, SENSITIVITY_TIERS[DEFAULT_TIER])


def is_available(name, tier: str = DEFAULT_TIER) -> bool:
    """Whether a tier may select this sensitivity. Unknown tiers count as free."""
    return resolve_sensitivity(name) in _levels(tier)


def required_tier(name) -> str:
    """Lowest tier that unlocks the sensitivity; "free" when none does."""
    canonical = resolve_sensitivity(name)
    for tier in TIERS:
        if canonical in SENSITIVITY_TIERS[tier]:
            return tier
    return DEFAULT_TIER


def available_sensitivities(tier: str = DEFAULT_TIER) -> list[dict]:
    """Every level a tier unlocks, with its threshold and the tier that first unlocks it."""
    return [
        {
            "value": level,
            "threshold": THRESHOLDS[level],
            "tier": required_tier(level),
        }
        for level in _levels(tier)
    ]
