"""Pydantic v2 models for usage requests and tier definitions."""

import math
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pricing_calculator.domain.types import QualityLevel, UsageCategory


def coerce_money(value: object) -> object:
    """Convert int/float/str monetary inputs to ``Decimal``.

    Floats come from YAML documents (``45.5``); they are converted through
    their shortest repr so ``0.1`` becomes ``Decimal("0.1")`` rather than the
    binary approximation.
    """
    if isinstance(value, bool):
        raise ValueError("Monetary values must be numbers, not booleans")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("Monetary values must be finite")
        return Decimal(repr(value))
    if isinstance(value, int):
        return Decimal(value)
    return value


def clamp_count(value: object, minimum: int = 0) -> object:
    """Clamp a count-like input so it never drops below *minimum*.

    ``None``, NaN, infinities and unparseable strings are treated as zero
    demand. Values already validated upstream pass through unchanged.
    """
    if value is None:
        return minimum
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return minimum
    if isinstance(value, float):
        if not math.isfinite(value):
            return minimum
        value = int(value)
    if isinstance(value, int) and value < minimum:
        return minimum
    return value


class Demand(BaseModel):
    """Monthly demand derived from a usage request, per coverable category."""

    model_config = ConfigDict(frozen=True)

    newsletters: int
    podcasts: int
    channel_days: int

    def for_category(self, category: UsageCategory) -> int:
        """Return the demand for a single category."""
        if category is UsageCategory.NEWSLETTERS:
            return self.newsletters
        if category is UsageCategory.PODCASTS:
            return self.podcasts
        return self.channel_days


class UsageRequest(BaseModel):
    """A single pricing request as entered by the user.

    Counts are monthly. The request is assumed to be range-clamped already;
    only negative or non-numeric values are defensively coerced to zero.
    """

    model_config = ConfigDict(frozen=True)

    media_count: int = Field(default=1, ge=1)
    newsletters: int = Field(default=0, ge=0)
    podcasts: int = Field(default=0, ge=0)
    channels: int = Field(default=0, ge=0)
    days_per_week: int = Field(default=0, ge=0)
    quality_level: QualityLevel = QualityLevel.STANDARD
    sources_per_medium: int = Field(default=0, ge=0)

    @field_validator(
        "newsletters",
        "podcasts",
        "channels",
        "days_per_week",
        "sources_per_medium",
        mode="before",
    )
    @classmethod
    def clamp_negative_counts(cls, v: object) -> object:
        """Treat negative or NaN-like counts as zero demand."""
        return clamp_count(v)

    @field_validator("media_count", mode="before")
    @classmethod
    def clamp_media_count(cls, v: object) -> object:
        """A request always covers at least one medium."""
        return clamp_count(v, minimum=1)

    def channel_days(self, month_weeks: int) -> int:
        """Messaging demand in channel-days per month."""
        return self.channels * self.days_per_week * month_weeks

    def demand(self, month_weeks: int) -> Demand:
        """Derive the coverable monthly demand for this request."""
        return Demand(
            newsletters=self.newsletters,
            podcasts=self.podcasts,
            channel_days=self.channel_days(month_weeks),
        )


class Payable(BaseModel):
    """Overage that can be bought at a fixed price per unit."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["payable"] = "payable"
    unit_price: Decimal

    @field_validator("unit_price", mode="before")
    @classmethod
    def convert_unit_price(cls, v: object) -> object:
        """Accept plain numbers for the unit price."""
        return coerce_money(v)

    @field_validator("unit_price")
    @classmethod
    def unit_price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure unit prices are never negative."""
        if v < 0:
            raise ValueError("overage unit_price must not be negative")
        return v


class Blocked(BaseModel):
    """No overage is possible; exceeding the allowance requires an upgrade."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["blocked"] = "blocked"


OverageRate = Annotated[Payable | Blocked, Field(discriminator="kind")]


def _coerce_rate(value: object) -> object:
    if value is None:
        return {"kind": "blocked"}
    if isinstance(value, Payable | Blocked | dict):
        return value
    return {"kind": "payable", "unit_price": value}


class IncludedAllowances(BaseModel):
    """Per-medium allowances bundled into a tier's base price."""

    model_config = ConfigDict(frozen=True)

    newsletters_per_month: int = Field(ge=0)
    podcasts_per_month: int = Field(ge=0)
    messaging_channel_days_per_month: int = Field(ge=0)
    quality_level: QualityLevel
    sources_per_medium: int = Field(ge=0)


class TierConstraints(BaseModel):
    """Hard capability constraints of a tier."""

    model_config = ConfigDict(frozen=True)

    podcast_allowed: bool = True


class OverageRates(BaseModel):
    """Per-unit overage prices of a tier.

    Catalog files write ``null`` for a category that cannot be bought as
    overage; it is parsed into :class:`Blocked`.
    """

    model_config = ConfigDict(frozen=True)

    newsletter_price: OverageRate
    podcast_price: OverageRate
    messaging_day_price: OverageRate
    source_price: OverageRate

    @field_validator(
        "newsletter_price",
        "podcast_price",
        "messaging_day_price",
        "source_price",
        mode="before",
    )
    @classmethod
    def parse_nullable_price(cls, v: object) -> object:
        """Map ``None`` to a blocked rate and numbers to a payable rate."""
        return _coerce_rate(v)

    def for_category(self, category: UsageCategory) -> Payable | Blocked:
        """Return the overage rate for a coverable category."""
        if category is UsageCategory.NEWSLETTERS:
            return self.newsletter_price
        if category is UsageCategory.PODCASTS:
            return self.podcast_price
        return self.messaging_day_price


class TierDefinition(BaseModel):
    """A priced service plan with bundled monthly allowances."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price_monthly: Decimal
    included: IncludedAllowances
    constraints: TierConstraints = Field(default_factory=TierConstraints)
    overage: OverageRates

    @field_validator("id", "name")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Ensure identifiers and names are not blank."""
        if not v.strip():
            raise ValueError("tier id and name must not be empty")
        return v

    @field_validator("price_monthly", mode="before")
    @classmethod
    def convert_price(cls, v: object) -> object:
        """Accept plain numbers for the monthly price."""
        return coerce_money(v)

    @field_validator("price_monthly")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure the monthly price is not negative."""
        if v < 0:
            raise ValueError("price_monthly must not be negative")
        return v

    def allowance(self, category: UsageCategory, media_count: int = 1) -> int:
        """Included monthly allowance for *category* across *media_count* media."""
        if category is UsageCategory.NEWSLETTERS:
            per_medium = self.included.newsletters_per_month
        elif category is UsageCategory.PODCASTS:
            per_medium = self.included.podcasts_per_month
        else:
            per_medium = self.included.messaging_channel_days_per_month
        return per_medium * media_count
