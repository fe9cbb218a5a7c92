"""Domain types, models, and errors for the pricing calculator."""

from pricing_calculator.domain.errors import (
    CatalogError,
    PricingCalculatorError,
    UnknownTierError,
)
from pricing_calculator.domain.models import (
    Blocked,
    Demand,
    IncludedAllowances,
    OverageRates,
    Payable,
    TierConstraints,
    TierDefinition,
    UsageRequest,
)
from pricing_calculator.domain.types import (
    QUALITY_ORDER,
    CategoryStatus,
    QualityLevel,
    UsageCategory,
)

__all__ = [
    "QUALITY_ORDER",
    "Blocked",
    "CatalogError",
    "CategoryStatus",
    "Demand",
    "IncludedAllowances",
    "OverageRates",
    "Payable",
    "PricingCalculatorError",
    "QualityLevel",
    "TierConstraints",
    "TierDefinition",
    "UnknownTierError",
    "UsageCategory",
    "UsageRequest",
]
