"""End-to-end quote pipeline: select a tier, price it, and check for an upgrade."""

from __future__ import annotations

import structlog

from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.domain.models import UsageRequest
from pricing_calculator.pricing.advisor import advise_upgrade
from pricing_calculator.pricing.engine import compute_pricing
from pricing_calculator.pricing.models import Quote
from pricing_calculator.pricing.selector import select_tier

logger = structlog.get_logger()


def build_quote(request: UsageRequest, catalog: PricingCatalog) -> Quote:
    """Price a usage request against the catalog.

    Runs the full pipeline from scratch; nothing is cached between calls.

    Args:
        request: The normalized usage request.
        catalog: The validated tier catalog.

    Returns:
        The pricing result and, if worthwhile, an upgrade recommendation.
    """
    decision = select_tier(request, catalog)
    result = compute_pricing(decision, request, catalog)
    recommendation = advise_upgrade(result, catalog)

    logger.debug(
        "quote_computed",
        tier_id=result.tier.id,
        fallback=result.has_residual_overages,
        total_monthly=result.total_monthly,
        blocked=[str(category) for category in result.blocked_categories],
        contact_sales=result.source_addon.contact_sales,
        upgrade_to=recommendation.next_tier.id if recommendation else None,
    )
    return Quote(result=result, recommendation=recommendation)
