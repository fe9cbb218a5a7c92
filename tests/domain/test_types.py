"""Tests for domain enumerations."""

import pytest

from pricing_calculator.domain.types import (
    QUALITY_ORDER,
    CategoryStatus,
    QualityLevel,
    UsageCategory,
)


class TestQualityLevel:
    """Tests for the ordered quality levels."""

    def test_values(self):
        assert QualityLevel.STANDARD == "standard"
        assert QualityLevel.EXTENDED == "extended"
        assert QualityLevel.CUSTOM == "custom"

    @pytest.mark.parametrize(
        ("lower", "higher"),
        [
            (QualityLevel.STANDARD, QualityLevel.EXTENDED),
            (QualityLevel.EXTENDED, QualityLevel.CUSTOM),
            (QualityLevel.STANDARD, QualityLevel.CUSTOM),
        ],
        ids=["standard_lt_extended", "extended_lt_custom", "standard_lt_custom"],
    )
    def test_rank_orders_levels(self, lower: QualityLevel, higher: QualityLevel):
        assert lower.rank < higher.rank

    def test_rank_differs_from_alphabetical_order(self):
        """'custom' sorts before 'extended' as a string but ranks above it."""
        assert QualityLevel.CUSTOM.value < QualityLevel.EXTENDED.value
        assert QualityLevel.CUSTOM.rank > QualityLevel.EXTENDED.rank

    def test_every_level_has_a_rank(self):
        assert set(QUALITY_ORDER) == set(QualityLevel)
        assert sorted(QUALITY_ORDER.values()) == [0, 1, 2]

    def test_label_is_capitalized(self):
        assert QualityLevel.EXTENDED.label == "Extended"


class TestCategoryEnums:
    """Tests for usage categories and category statuses."""

    def test_usage_categories_in_check_order(self):
        assert list(UsageCategory) == [
            UsageCategory.NEWSLETTERS,
            UsageCategory.PODCASTS,
            UsageCategory.MESSAGING,
        ]

    def test_category_status_values(self):
        assert CategoryStatus.WITHIN_ALLOWANCE == "within_allowance"
        assert CategoryStatus.OVERAGE == "overage"
        assert CategoryStatus.BLOCKED == "blocked"
        assert CategoryStatus.NOT_AVAILABLE == "not_available"
