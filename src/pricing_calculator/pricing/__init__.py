"""Tier selection, pricing and upgrade advice.

Re-exports key functions and types for convenient access:
    from pricing_calculator.pricing import build_quote, select_tier, compute_pricing
"""

from pricing_calculator.pricing.advisor import (
    UPGRADE_THRESHOLD,
    advise_upgrade,
    price_without_overages,
)
from pricing_calculator.pricing.engine import (
    calculate_category_overage,
    calculate_quality_addon,
    calculate_source_addon,
    compute_pricing,
)
from pricing_calculator.pricing.models import (
    CategoryOverage,
    CategoryOverages,
    IncludedUsage,
    PricingResult,
    QualityAddon,
    Quote,
    SourceAddon,
    TierDecision,
    UpgradeRecommendation,
)
from pricing_calculator.pricing.quote import build_quote
from pricing_calculator.pricing.selector import FITS_ENTIRELY, select_tier

__all__ = [
    "FITS_ENTIRELY",
    "UPGRADE_THRESHOLD",
    "CategoryOverage",
    "CategoryOverages",
    "IncludedUsage",
    "PricingResult",
    "QualityAddon",
    "Quote",
    "SourceAddon",
    "TierDecision",
    "UpgradeRecommendation",
    "advise_upgrade",
    "build_quote",
    "calculate_category_overage",
    "calculate_quality_addon",
    "calculate_source_addon",
    "compute_pricing",
    "price_without_overages",
    "select_tier",
]
