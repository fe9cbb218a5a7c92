"""Text builders for pricing results.

Pure functions that turn a :class:`PricingResult` into copyable text, the
included-vs-needed transparency table, and the upgrade / contact-sales hints.
All currency formatting lives here; the pricing core only returns numbers.
"""

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pricing_calculator.catalog.models import DisplayConfig
from pricing_calculator.domain.types import CategoryStatus, UsageCategory
from pricing_calculator.pricing.models import (
    CategoryOverage,
    PricingResult,
    UpgradeRecommendation,
)

TWO_PLACES = Decimal("0.01")

HEADER_WIDTH = 44

_OVERAGE_LABELS: dict[UsageCategory, str] = {
    UsageCategory.NEWSLETTERS: "Newsletters",
    UsageCategory.PODCASTS: "Podcasts",
    UsageCategory.MESSAGING: "Messaging",
}


def format_money(amount: Decimal | None, currency: str = "€") -> str:
    """Format an amount with German digit grouping, e.g. ``1.700 €``.

    Whole amounts are shown without decimals, others with two (``12,50 €``).
    ``None`` (a blocked price) renders as an en dash.
    """
    if amount is None:
        return "–"
    quantized = amount.quantize(TWO_PLACES)
    if quantized == quantized.to_integral_value():
        text = f"{int(quantized):,}".replace(",", ".")
    else:
        text = f"{quantized:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{text} {currency}"


class RowStatus(StrEnum):
    """Visual status of a transparency-table row."""

    OK = "ok"
    OVERAGE = "overage"
    ADDON = "addon"
    BLOCKED = "blocked"


class TransparencyRow(BaseModel):
    """One row of the included-vs-needed comparison table."""

    model_config = ConfigDict(frozen=True)

    label: str
    included: str
    demand: str
    status: RowStatus
    status_text: str | None = None


def _category_row(overage: CategoryOverage, unit: str, overage_unit: str) -> TransparencyRow:
    label = _OVERAGE_LABELS[overage.category]
    if overage.status is CategoryStatus.NOT_AVAILABLE:
        status, text = RowStatus.BLOCKED, "Not available"
    elif overage.status is CategoryStatus.BLOCKED:
        status, text = RowStatus.BLOCKED, "Upgrade required"
    elif overage.status is CategoryStatus.OVERAGE:
        status, text = RowStatus.OVERAGE, f"+{overage.quantity} {overage_unit}"
    else:
        status, text = RowStatus.OK, None
    return TransparencyRow(
        label=label,
        included=f"{overage.included}{unit}",
        demand=f"{overage.demand}{unit}",
        status=status,
        status_text=text,
    )


def build_transparency_rows(
    result: PricingResult, currency: str = "€"
) -> list[TransparencyRow]:
    """Compare the chosen tier's allowances with the requested usage.

    Returns:
        Rows for newsletters, podcasts, messaging, quality and sources.
    """
    overages = result.overages
    rows = [
        _category_row(overages.newsletters, "/month", "overage"),
        _category_row(overages.podcasts, "/month", "overage"),
        _category_row(overages.messaging, " channel-days", "channel-days"),
    ]

    quality = result.quality_addon
    rows.append(
        TransparencyRow(
            label="Quality setup",
            included=result.included.quality_level.label,
            demand=result.request.quality_level.label,
            status=RowStatus.ADDON if quality.applicable else RowStatus.OK,
            status_text=(
                f"+{format_money(quality.amount, currency)} add-on"
                if quality.applicable
                else None
            ),
        )
    )

    sources = result.source_addon
    if sources.applicable:
        source_status = RowStatus.ADDON
        source_text: str | None = f"+{format_money(sources.amount, currency)} add-on"
    elif sources.contact_sales:
        source_status, source_text = RowStatus.BLOCKED, "Contact sales"
    else:
        source_status, source_text = RowStatus.OK, None
    rows.append(
        TransparencyRow(
            label="Sources/medium",
            included=str(result.included.sources_per_medium),
            demand=str(result.request.sources_per_medium),
            status=source_status,
            status_text=source_text,
        )
    )
    return rows


def render_breakdown_text(
    result: PricingResult, display: DisplayConfig | None = None
) -> str:
    """Render the plain-text price breakdown offered for copying.

    Blocked categories are listed explicitly so a missing price is never
    mistaken for a free one.
    """
    display = display or DisplayConfig()
    currency = display.currency
    media_count = result.request.media_count

    lines: list[str] = [
        f"Pricing – {result.tier.name}",
        "=" * HEADER_WIDTH,
        "",
        f"Base: {result.tier.name} = {format_money(result.base, currency)}",
    ]

    quality = result.quality_addon
    if quality.applicable:
        lines.append(
            f"Quality add-on ({quality.from_level.label} -> {quality.to_level.label}): "
            f"{format_money(quality.amount, currency)}"
        )

    sources = result.source_addon
    if sources.applicable:
        media = f" x {media_count} media" if media_count > 1 else ""
        lines.append(
            f"Sources add-on: {sources.extra_sources} extra x "
            f"{format_money(sources.unit_price, currency)}{media} = "
            f"{format_money(sources.amount, currency)}"
        )
    elif sources.contact_sales:
        lines.append("Sources: contact sales")

    for overage in result.overages.all():
        if overage.quantity == 0 and not overage.needs_upgrade:
            continue
        label = _OVERAGE_LABELS[overage.category]
        if overage.needs_upgrade:
            lines.append(f"{label}: upgrade required")
            continue
        unit = " channel-days" if overage.category is UsageCategory.MESSAGING else ""
        lines.append(
            f"Overage {label.lower()}: {overage.quantity}{unit} x "
            f"{format_money(overage.unit_price, currency)} = "
            f"{format_money(overage.cost, currency)}"
        )

    lines.append("")
    lines.append(f"Total monthly: {format_money(result.total_monthly, currency)}")
    if display.show_yearly:
        lines.append(f"Total yearly: {format_money(result.total_yearly, currency)}")

    return "\n".join(lines)


def render_upgrade_hint(
    recommendation: UpgradeRecommendation | None, currency: str = "€"
) -> str | None:
    """Describe an upgrade recommendation, or ``None`` when there is none."""
    if recommendation is None:
        return None
    next_name = recommendation.next_tier.name
    if recommendation.next_is_cheaper:
        return (
            f"{next_name} would be cheaper "
            f"({format_money(recommendation.next_total, currency)}/month) "
            "with more included outputs."
        )
    return (
        f"For {format_money(recommendation.difference, currency)} more per month "
        f"you get {next_name} with considerably more included outputs."
    )


def render_contact_sales(result: PricingResult, max_sources_per_medium: int) -> str | None:
    """Sales-escalation message, or ``None`` when sources are priced normally.

    Escalation happens either above the catalog ceiling or when the chosen
    tier sells no extra sources at all; the message names the actual cause.
    """
    if not result.source_addon.contact_sales:
        return None
    if result.request.sources_per_medium > max_sources_per_medium:
        cause = f"Sources > {max_sources_per_medium} per medium"
    else:
        cause = f"Extra sources are not available in {result.tier.name}"
    return f"{cause}: please contact our sales team for an individual offer."
