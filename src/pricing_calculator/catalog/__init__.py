"""Tier catalog models and YAML loading."""

from pricing_calculator.catalog.loader import DEFAULT_CATALOG_PATH, load_catalog, parse_catalog
from pricing_calculator.catalog.models import (
    DisplayConfig,
    PricingCatalog,
    QualityAddonConfig,
    SourceAddonConfig,
)

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "DisplayConfig",
    "PricingCatalog",
    "QualityAddonConfig",
    "SourceAddonConfig",
    "load_catalog",
    "parse_catalog",
]
