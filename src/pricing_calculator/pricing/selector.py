"""Tier selection: find the cheapest tier whose allowances cover the demand.

The catalog is ordered from cheapest to most capable, so the first tier that
fits is by construction the cheapest adequate one. When a tier fits, the
reasons the tier *before* it was rejected are reported -- they explain why the
cheaper option was skipped. When nothing fits, the last tier is used and its
own rejection reasons are kept so the residual overages can be explained.
"""

from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.domain.models import Demand, TierDefinition, UsageRequest
from pricing_calculator.domain.types import UsageCategory
from pricing_calculator.pricing.models import TierDecision

FITS_ENTIRELY = "All outputs fit in this tier"


def podcast_unavailable_reason(tier: TierDefinition) -> str:
    """Rejection message for a tier that forbids podcasts."""
    return f"Podcast unavailable in {tier.name}"


def _exceeded_reason(category: UsageCategory, demand: int, included: int) -> str:
    if category is UsageCategory.NEWSLETTERS:
        return f"Newsletters: {demand} > {included} included"
    if category is UsageCategory.PODCASTS:
        return f"Podcasts: {demand} > {included} included"
    return f"Messaging: {demand} channel-days > {included} included"


def rejection_reasons(
    tier: TierDefinition, demand: Demand, media_count: int
) -> list[str]:
    """Collect every reason *tier* cannot cover *demand*.

    A forbidden podcast request is a hard rejection: it is the only reason
    reported and the allowance checks are skipped. Otherwise all exceeded
    categories are reported, not just the first.

    Args:
        tier: The tier being evaluated.
        demand: Derived monthly demand.
        media_count: Multiplier applied to per-medium allowances.

    Returns:
        Human-readable reasons; empty when the tier fits.
    """
    if demand.podcasts > 0 and not tier.constraints.podcast_allowed:
        return [podcast_unavailable_reason(tier)]

    reasons: list[str] = []
    for category in UsageCategory:
        wanted = demand.for_category(category)
        included = tier.allowance(category, media_count)
        if wanted > included:
            reasons.append(_exceeded_reason(category, wanted, included))
    return reasons


def select_tier(
    request: UsageRequest,
    catalog: PricingCatalog,
    month_weeks: int | None = None,
) -> TierDecision:
    """Choose the cheapest tier that covers the request.

    Args:
        request: The usage request.
        catalog: Ordered tier catalog.
        month_weeks: Override for the catalog's weeks-per-month constant.

    Returns:
        The decision with the chosen tier, the rejection trace of the tier
        before it, and whether residual overages must be priced.
    """
    weeks = catalog.month_weeks if month_weeks is None else month_weeks
    demand = request.demand(weeks)

    last_reasons: list[str] = []
    for tier in catalog.tiers:
        reasons = rejection_reasons(tier, demand, request.media_count)
        if not reasons:
            return TierDecision(
                tier=tier,
                rejection_trace=tuple(last_reasons or [FITS_ENTIRELY]),
                has_residual_overages=False,
                demand=demand,
            )
        last_reasons = reasons

    return TierDecision(
        tier=catalog.last_tier,
        rejection_trace=tuple(last_reasons),
        has_residual_overages=True,
        demand=demand,
    )
