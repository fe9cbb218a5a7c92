"""Domain enumerations for the pricing calculator."""

from enum import StrEnum


class QualityLevel(StrEnum):
    """Content-quality setup levels, from cheapest to most elaborate.

    Levels are totally ordered by :attr:`rank`. Never compare the raw string
    values -- ``"custom" < "extended"`` alphabetically, which is wrong here.
    """

    STANDARD = "standard"
    EXTENDED = "extended"
    CUSTOM = "custom"

    @property
    def rank(self) -> int:
        """Position of this level in the quality ordering (0 = lowest)."""
        return QUALITY_ORDER[self]

    @property
    def label(self) -> str:
        """Human-readable label for this level."""
        return self.value.capitalize()


QUALITY_ORDER: dict[QualityLevel, int] = {
    QualityLevel.STANDARD: 0,
    QualityLevel.EXTENDED: 1,
    QualityLevel.CUSTOM: 2,
}


class UsageCategory(StrEnum):
    """Coverable demand categories checked during tier selection."""

    NEWSLETTERS = "newsletters"
    PODCASTS = "podcasts"
    MESSAGING = "messaging"


class CategoryStatus(StrEnum):
    """Outcome of comparing demand against a tier's allowance for one category."""

    WITHIN_ALLOWANCE = "within_allowance"
    OVERAGE = "overage"
    # Demand exceeds the allowance and the tier has no overage rate
    BLOCKED = "blocked"
    # Tier forbids the category outright (podcasts on entry tiers)
    NOT_AVAILABLE = "not_available"
