"""Pydantic models for the static tier catalog and add-on configuration."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pricing_calculator.domain.errors import UnknownTierError
from pricing_calculator.domain.models import TierDefinition, coerce_money
from pricing_calculator.domain.types import QualityLevel, UsageCategory


class QualityAddonConfig(BaseModel):
    """Quality setup add-on, charged once per contract using delta pricing.

    Attributes:
        price_by_level: Absolute price of every quality level. The add-on for a
            tier is ``price[desired] - price[included]``.
    """

    model_config = ConfigDict(frozen=True)

    price_by_level: dict[QualityLevel, Decimal]

    @field_validator("price_by_level", mode="before")
    @classmethod
    def convert_prices(cls, v: object) -> object:
        """Accept plain numbers for level prices."""
        if isinstance(v, dict):
            return {level: coerce_money(price) for level, price in v.items()}
        return v

    @field_validator("price_by_level")
    @classmethod
    def every_level_must_be_priced(
        cls, v: dict[QualityLevel, Decimal]
    ) -> dict[QualityLevel, Decimal]:
        """Ensure each quality level has a price."""
        missing = [level.value for level in QualityLevel if level not in v]
        if missing:
            raise ValueError(f"price_by_level is missing levels: {', '.join(missing)}")
        return v

    def price_for(self, level: QualityLevel) -> Decimal:
        """Absolute price of a quality level."""
        return self.price_by_level[level]


class SourceAddonConfig(BaseModel):
    """Extra-sources add-on settings.

    Attributes:
        max_sources_per_medium: Hard ceiling above which sources are no
            longer priced automatically and sales must be contacted.
    """

    model_config = ConfigDict(frozen=True)

    max_sources_per_medium: int = Field(default=20, ge=0)


class DisplayConfig(BaseModel):
    """Presentation settings; never read by the pricing core."""

    model_config = ConfigDict(frozen=True)

    currency: str = "€"
    show_yearly: bool = True


class PricingCatalog(BaseModel):
    """Ordered tier catalog, cheapest and least capable first.

    Tier order is significant: it is both the price ranking and the search
    order used by the tier selector. Allowances and prices must be
    non-decreasing along the catalog.
    """

    model_config = ConfigDict(frozen=True)

    month_weeks: int = Field(default=4, ge=1)
    tiers: tuple[TierDefinition, ...]
    quality: QualityAddonConfig
    sources: SourceAddonConfig = Field(default_factory=SourceAddonConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("tiers")
    @classmethod
    def tiers_must_not_be_empty(
        cls, v: tuple[TierDefinition, ...]
    ) -> tuple[TierDefinition, ...]:
        """Ensure the catalog offers at least one tier."""
        if len(v) == 0:
            raise ValueError("catalog must define at least one tier")
        return v

    @model_validator(mode="after")
    def tiers_must_be_consistent(self) -> "PricingCatalog":
        """Ensure unique ids and monotonic prices, allowances and podcast access."""
        seen: set[str] = set()
        for tier in self.tiers:
            if tier.id in seen:
                raise ValueError(f"duplicate tier id '{tier.id}'")
            seen.add(tier.id)

        for previous, current in zip(self.tiers, self.tiers[1:]):
            if current.price_monthly < previous.price_monthly:
                raise ValueError(
                    f"tier '{current.id}' is cheaper than preceding tier '{previous.id}'"
                )
            for category in UsageCategory:
                if current.allowance(category) < previous.allowance(category):
                    raise ValueError(
                        f"tier '{current.id}' includes fewer {category} "
                        f"than preceding tier '{previous.id}'"
                    )
            if previous.constraints.podcast_allowed and not current.constraints.podcast_allowed:
                raise ValueError(
                    f"tier '{current.id}' forbids podcasts although "
                    f"preceding tier '{previous.id}' allows them"
                )
        return self

    def tier_index(self, tier_id: str) -> int:
        """Position of a tier in the catalog.

        Raises:
            UnknownTierError: If no tier has the given id.
        """
        for index, tier in enumerate(self.tiers):
            if tier.id == tier_id:
                return index
        raise UnknownTierError(tier_id)

    def get_tier(self, tier_id: str) -> TierDefinition:
        """Look up a tier by id.

        Raises:
            UnknownTierError: If no tier has the given id.
        """
        return self.tiers[self.tier_index(tier_id)]

    def next_tier(self, tier_id: str) -> TierDefinition | None:
        """The tier following *tier_id*, or ``None`` for the last tier."""
        index = self.tier_index(tier_id)
        if index >= len(self.tiers) - 1:
            return None
        return self.tiers[index + 1]

    @property
    def last_tier(self) -> TierDefinition:
        """The most capable tier, used as the no-fit fallback."""
        return self.tiers[-1]
