"""Shared pytest fixtures for the pricing calculator test suite."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from pricing_calculator.catalog.loader import parse_catalog
from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.domain.models import UsageRequest

# Mirrors config/catalog.yaml
CATALOG_DATA: dict[str, Any] = {
    "month_weeks": 4,
    "tiers": [
        {
            "id": "T1",
            "name": "Tier 1 – Starter",
            "price_monthly": 500,
            "included": {
                "newsletters_per_month": 8,
                "podcasts_per_month": 0,
                "messaging_channel_days_per_month": 8,
                "quality_level": "standard",
                "sources_per_medium": 3,
            },
            "constraints": {"podcast_allowed": False},
            "overage": {
                "newsletter_price": 45,
                "podcast_price": None,
                "messaging_day_price": 35,
                "source_price": 100,
            },
        },
        {
            "id": "T2",
            "name": "Tier 2 – Pro",
            "price_monthly": 1700,
            "included": {
                "newsletters_per_month": 30,
                "podcasts_per_month": 20,
                "messaging_channel_days_per_month": 84,
                "quality_level": "extended",
                "sources_per_medium": 5,
            },
            "constraints": {"podcast_allowed": True},
            "overage": {
                "newsletter_price": 35,
                "podcast_price": 85,
                "messaging_day_price": 30,
                "source_price": 75,
            },
        },
        {
            "id": "T3",
            "name": "Tier 3 – Enterprise",
            "price_monthly": 3500,
            "included": {
                "newsletters_per_month": 100,
                "podcasts_per_month": 50,
                "messaging_channel_days_per_month": 168,
                "quality_level": "custom",
                "sources_per_medium": 15,
            },
            "constraints": {"podcast_allowed": True},
            "overage": {
                "newsletter_price": 30,
                "podcast_price": 70,
                "messaging_day_price": 25,
                "source_price": 50,
            },
        },
    ],
    "quality": {"price_by_level": {"standard": 0, "extended": 350, "custom": 900}},
    "sources": {"max_sources_per_medium": 20},
    "display": {"currency": "€", "show_yearly": True},
}


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """A fresh, mutable copy of the three-tier catalog document."""
    return copy.deepcopy(CATALOG_DATA)


@pytest.fixture
def catalog(catalog_data: dict[str, Any]) -> PricingCatalog:
    """The standard three-tier catalog (Starter, Pro, Enterprise)."""
    return parse_catalog(catalog_data)


@pytest.fixture
def empty_request() -> UsageRequest:
    """A request with zero demand in every category."""
    return UsageRequest()


@pytest.fixture
def pro_request() -> UsageRequest:
    """Fits Tier 2 exactly: 10 newsletters, 2 channels x 3 days, 5 sources."""
    return UsageRequest(
        newsletters=10,
        podcasts=0,
        channels=2,
        days_per_week=3,
        sources_per_medium=5,
    )
