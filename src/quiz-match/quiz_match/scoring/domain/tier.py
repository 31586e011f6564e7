"""CompatibilityTier — the headline band a percentage falls into."""

from enum import StrEnum


class CompatibilityTier(StrEnum):
    SOULMATE = "soulmate"
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    DIFFERENT = "different"

    @classmethod
    def for_score(cls, score: int) -> "CompatibilityTier":
        for threshold, tier in _THRESHOLDS:
            if score >= threshold:
                return tier
        return cls.DIFFERENT

    @property
    def headline(self) -> str:
        return _COPY[self][0]

    @property
    def message(self) -> str:
        return _COPY[self][1]


# Checked top-down; the first threshold the score reaches wins.
_THRESHOLDS: list[tuple[int, CompatibilityTier]] = [
    (90, CompatibilityTier.SOULMATE),
    (80, CompatibilityTier.EXCELLENT),
    (70, CompatibilityTier.GOOD),
    (60, CompatibilityTier.FAIR),
]

_COPY: dict[CompatibilityTier, tuple[str, str]] = {
    CompatibilityTier.SOULMATE: ("A perfect match!", "You two are in perfect tune."),
    CompatibilityTier.EXCELLENT: ("Excellent match!", "A truly wonderful pairing."),
    CompatibilityTier.GOOD: ("Good match!", "You understand each other well."),
    CompatibilityTier.FAIR: ("Fair match", "With some effort this can go far."),
    CompatibilityTier.DIFFERENT: (
        "Different personalities",
        "You have plenty to learn from each other.",
    ),
}
