"""Upgrade advisor: suggest the next tier when it is close to (or below) the current price.

The next tier is priced with the same request but assuming it absorbs all
current overages. That assumption is not re-checked against the raw demand,
so when the next tier does not actually cover the usage the quoted next-tier
price understates its true cost.
"""

from decimal import Decimal

from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.domain.models import TierDefinition, UsageRequest
from pricing_calculator.pricing.engine import (
    calculate_quality_addon,
    calculate_source_addon,
    to_money,
)
from pricing_calculator.pricing.models import PricingResult, UpgradeRecommendation

# Recommend upgrading once the current total reaches 85% of the next tier's total
UPGRADE_THRESHOLD = Decimal("0.85")


def price_without_overages(
    request: UsageRequest,
    tier: TierDefinition,
    catalog: PricingCatalog,
) -> Decimal:
    """Monthly price of *tier* for *request*: base plus add-ons, no overages."""
    base = tier.price_monthly * request.media_count
    quality = calculate_quality_addon(request.quality_level, tier, catalog.quality)
    sources = calculate_source_addon(request, tier, catalog.sources)
    return to_money(base + quality.amount + sources.amount)


def advise_upgrade(
    result: PricingResult,
    catalog: PricingCatalog,
    threshold: Decimal = UPGRADE_THRESHOLD,
) -> UpgradeRecommendation | None:
    """Recommend the next tier when the current total is near its price.

    Args:
        result: The pricing result for the chosen tier.
        catalog: The catalog the result was computed from.
        threshold: Fraction of the next tier's total at which an upgrade is
            recommended. Defaults to 0.85.

    Returns:
        A recommendation, or ``None`` when the chosen tier is the last one or
        the next tier is clearly more expensive.

    Raises:
        UnknownTierError: If the result's tier is not in *catalog*.
    """
    next_tier = catalog.next_tier(result.tier.id)
    if next_tier is None:
        return None

    next_total = price_without_overages(result.request, next_tier, catalog)
    current_total = result.total_monthly

    if current_total < next_total * threshold:
        return None

    return UpgradeRecommendation(
        current_tier=result.tier,
        next_tier=next_tier,
        current_total=current_total,
        next_total=next_total,
        difference=to_money(next_total - current_total),
    )
