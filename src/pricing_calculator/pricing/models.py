"""Result models produced by the tier selector, pricing engine and advisor.

All models are frozen and carry plain numbers: no currency symbols, no
formatting, no localisation. Monetary amounts are ``Decimal``.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from pricing_calculator.domain.models import Demand, TierDefinition, UsageRequest
from pricing_calculator.domain.types import CategoryStatus, QualityLevel, UsageCategory


class TierDecision(BaseModel):
    """Outcome of tier selection.

    Attributes:
        tier: The chosen tier.
        rejection_trace: Why the tier evaluated immediately before the chosen
            one was rejected (or a default "fits" message).
        has_residual_overages: True when no tier covered the demand and the
            last tier was chosen as a fallback.
        demand: The derived demand the tiers were compared against.
    """

    model_config = ConfigDict(frozen=True)

    tier: TierDefinition
    rejection_trace: tuple[str, ...]
    has_residual_overages: bool = False
    demand: Demand


class QualityAddon(BaseModel):
    """Global quality add-on, delta priced against the tier's included level."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    applicable: bool
    from_level: QualityLevel
    to_level: QualityLevel


class SourceAddon(BaseModel):
    """Extra-sources add-on, charged per medium.

    Attributes:
        amount: Total add-on across all media (0 when escalated to sales).
        per_medium: Add-on for a single medium.
        extra_sources: Requested sources above the tier allowance.
        unit_price: Price per extra source, ``None`` if not purchasable.
        applicable: Whether the add-on is part of the price.
        contact_sales: Requested sources exceed what can be priced
            automatically; excluded from totals.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    per_medium: Decimal
    extra_sources: int
    unit_price: Decimal | None
    applicable: bool
    contact_sales: bool


class CategoryOverage(BaseModel):
    """Usage beyond a tier's allowance for one category.

    ``unit_price`` and ``cost`` are ``None`` when the category is blocked or
    not available at the tier; such categories add nothing to the total but
    still need an upgrade.
    """

    model_config = ConfigDict(frozen=True)

    category: UsageCategory
    included: int
    demand: int
    quantity: int
    unit_price: Decimal | None
    cost: Decimal | None
    status: CategoryStatus

    @property
    def needs_upgrade(self) -> bool:
        """True when the demand cannot be bought as overage at this tier."""
        return self.status in (CategoryStatus.BLOCKED, CategoryStatus.NOT_AVAILABLE)


class CategoryOverages(BaseModel):
    """Overage breakdown for every coverable category."""

    model_config = ConfigDict(frozen=True)

    newsletters: CategoryOverage
    podcasts: CategoryOverage
    messaging: CategoryOverage

    def all(self) -> tuple[CategoryOverage, CategoryOverage, CategoryOverage]:
        """Every category overage in display order."""
        return (self.newsletters, self.podcasts, self.messaging)


class IncludedUsage(BaseModel):
    """Allowances of the chosen tier scaled to the requested media count."""

    model_config = ConfigDict(frozen=True)

    newsletters: int
    podcasts: int
    messaging_channel_days: int
    quality_level: QualityLevel
    sources_per_medium: int


class PricingResult(BaseModel):
    """Full computed price breakdown for a usage request."""

    model_config = ConfigDict(frozen=True)

    tier: TierDefinition
    request: UsageRequest
    demand: Demand
    rejection_trace: tuple[str, ...]
    has_residual_overages: bool
    base: Decimal
    quality_addon: QualityAddon
    source_addon: SourceAddon
    overages: CategoryOverages
    overage_cost: Decimal
    total_monthly: Decimal
    total_yearly: Decimal
    included: IncludedUsage

    @property
    def has_overages(self) -> bool:
        """True when any category exceeds its allowance."""
        return any(overage.quantity > 0 for overage in self.overages.all())

    @property
    def blocked_categories(self) -> list[UsageCategory]:
        """Categories that cannot be priced and require a tier upgrade."""
        return [overage.category for overage in self.overages.all() if overage.needs_upgrade]


class UpgradeRecommendation(BaseModel):
    """Suggestion to move to the next tier.

    Attributes:
        current_tier: The tier currently chosen.
        next_tier: The tier immediately after it in the catalog.
        current_total: Monthly total on the current tier.
        next_total: Monthly total on the next tier, assuming no overages.
        difference: ``next_total - current_total``; negative means the next
            tier is already cheaper for this usage.
    """

    model_config = ConfigDict(frozen=True)

    current_tier: TierDefinition
    next_tier: TierDefinition
    current_total: Decimal
    next_total: Decimal
    difference: Decimal

    @property
    def next_is_cheaper(self) -> bool:
        """True when upgrading would not cost more per month."""
        return self.difference <= 0


class Quote(BaseModel):
    """Pricing result together with the optional upgrade recommendation."""

    model_config = ConfigDict(frozen=True)

    result: PricingResult
    recommendation: UpgradeRecommendation | None = None
