"""Pricing engine: turns a tier decision into an itemized monthly price.

All monetary calculations use Decimal arithmetic and are quantized to two
decimal places with ROUND_HALF_UP rounding.

Charging rules:
- Base price and the extra-sources add-on are charged per medium.
- The quality add-on is global (once per contract) and delta priced.
- Overages are charged per unit above the media-scaled allowance; a category
  without an overage rate is blocked and contributes nothing to the total.
- Sources above the catalog ceiling are never priced automatically.
"""

from decimal import ROUND_HALF_UP, Decimal

from pricing_calculator.catalog.models import (
    PricingCatalog,
    QualityAddonConfig,
    SourceAddonConfig,
)
from pricing_calculator.domain.models import (
    Blocked,
    Demand,
    Payable,
    TierDefinition,
    UsageRequest,
)
from pricing_calculator.domain.types import CategoryStatus, QualityLevel, UsageCategory
from pricing_calculator.pricing.models import (
    CategoryOverage,
    CategoryOverages,
    IncludedUsage,
    PricingResult,
    QualityAddon,
    SourceAddon,
    TierDecision,
)

# Precision: all monetary values quantized to 2 decimal places
TWO_PLACES = Decimal("0.01")

MONTHS_PER_YEAR = 12

ZERO = Decimal("0")


def to_money(amount: Decimal) -> Decimal:
    """Quantize an amount to cents."""
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def calculate_quality_addon(
    desired: QualityLevel,
    tier: TierDefinition,
    config: QualityAddonConfig,
) -> QualityAddon:
    """Delta-priced quality add-on for *desired* on *tier*.

    The add-on only applies when the desired level ranks strictly above the
    level bundled with the tier; otherwise it is zero.
    """
    included = tier.included.quality_level
    if desired.rank > included.rank:
        delta = config.price_for(desired) - config.price_for(included)
        return QualityAddon(
            amount=to_money(max(delta, ZERO)),
            applicable=True,
            from_level=included,
            to_level=desired,
        )
    return QualityAddon(
        amount=to_money(ZERO),
        applicable=False,
        from_level=included,
        to_level=desired,
    )


def calculate_source_addon(
    request: UsageRequest,
    tier: TierDefinition,
    config: SourceAddonConfig,
) -> SourceAddon:
    """Extra-sources add-on for *request* on *tier*.

    Requests above the catalog ceiling are escalated to sales and not priced,
    however large the excess. A tier without a source overage rate escalates
    any excess the same way.
    """
    requested = request.sources_per_medium
    extra = max(0, requested - tier.included.sources_per_medium)
    rate = tier.overage.source_price
    unit_price = rate.unit_price if isinstance(rate, Payable) else None

    contact_sales = requested > config.max_sources_per_medium or (
        extra > 0 and unit_price is None
    )
    if contact_sales or extra == 0 or unit_price is None:
        return SourceAddon(
            amount=to_money(ZERO),
            per_medium=to_money(ZERO),
            extra_sources=extra,
            unit_price=unit_price,
            applicable=False,
            contact_sales=contact_sales,
        )

    per_medium = extra * unit_price
    return SourceAddon(
        amount=to_money(per_medium * request.media_count),
        per_medium=to_money(per_medium),
        extra_sources=extra,
        unit_price=unit_price,
        applicable=True,
        contact_sales=False,
    )


def calculate_category_overage(
    category: UsageCategory,
    tier: TierDefinition,
    demand: Demand,
    media_count: int,
) -> CategoryOverage:
    """Overage for one category of *demand* against *tier*.

    Forbidden podcasts are reported as not available even if the tier carries
    a numeric podcast rate.
    """
    wanted = demand.for_category(category)
    included = tier.allowance(category, media_count)
    quantity = max(0, wanted - included)

    forbidden = (
        category is UsageCategory.PODCASTS
        and wanted > 0
        and not tier.constraints.podcast_allowed
    )
    rate: Payable | Blocked = Blocked() if forbidden else tier.overage.for_category(category)

    if isinstance(rate, Payable):
        return CategoryOverage(
            category=category,
            included=included,
            demand=wanted,
            quantity=quantity,
            unit_price=rate.unit_price,
            cost=to_money(quantity * rate.unit_price),
            status=CategoryStatus.OVERAGE if quantity > 0 else CategoryStatus.WITHIN_ALLOWANCE,
        )

    if forbidden:
        status = CategoryStatus.NOT_AVAILABLE
    elif quantity > 0:
        status = CategoryStatus.BLOCKED
    else:
        status = CategoryStatus.WITHIN_ALLOWANCE
    return CategoryOverage(
        category=category,
        included=included,
        demand=wanted,
        quantity=quantity,
        unit_price=None,
        cost=None,
        status=status,
    )


def compute_pricing(
    decision: TierDecision,
    request: UsageRequest,
    catalog: PricingCatalog,
    month_weeks: int | None = None,
) -> PricingResult:
    """Compute the full price breakdown for the chosen tier.

    Args:
        decision: Output of :func:`~pricing_calculator.pricing.selector.select_tier`.
        request: The usage request the decision was made for.
        catalog: The catalog providing add-on configuration.
        month_weeks: Override for the weeks-per-month constant. Defaults to
            the demand already derived in *decision*.

    Returns:
        The itemized result. Blocked categories stay visible with a ``None``
        cost and are excluded from the totals.
    """
    tier = decision.tier
    media_count = request.media_count
    demand = decision.demand if month_weeks is None else request.demand(month_weeks)

    base = to_money(tier.price_monthly * media_count)
    quality = calculate_quality_addon(request.quality_level, tier, catalog.quality)
    sources = calculate_source_addon(request, tier, catalog.sources)

    overages = CategoryOverages(
        newsletters=calculate_category_overage(
            UsageCategory.NEWSLETTERS, tier, demand, media_count
        ),
        podcasts=calculate_category_overage(UsageCategory.PODCASTS, tier, demand, media_count),
        messaging=calculate_category_overage(
            UsageCategory.MESSAGING, tier, demand, media_count
        ),
    )
    overage_cost = sum(
        (overage.cost for overage in overages.all() if overage.cost is not None),
        ZERO,
    )

    total_monthly = to_money(base + quality.amount + sources.amount + overage_cost)

    return PricingResult(
        tier=tier,
        request=request,
        demand=demand,
        rejection_trace=decision.rejection_trace,
        has_residual_overages=decision.has_residual_overages,
        base=base,
        quality_addon=quality,
        source_addon=sources,
        overages=overages,
        overage_cost=to_money(overage_cost),
        total_monthly=total_monthly,
        total_yearly=to_money(total_monthly * MONTHS_PER_YEAR),
        included=IncludedUsage(
            newsletters=tier.allowance(UsageCategory.NEWSLETTERS, media_count),
            podcasts=tier.allowance(UsageCategory.PODCASTS, media_count),
            messaging_channel_days=tier.allowance(UsageCategory.MESSAGING, media_count),
            quality_level=tier.included.quality_level,
            sources_per_medium=tier.included.sources_per_medium,
        ),
    )
