"""Human-readable rendering of pricing results."""

from pricing_calculator.presentation.breakdown import (
    RowStatus,
    TransparencyRow,
    build_transparency_rows,
    format_money,
    render_breakdown_text,
    render_contact_sales,
    render_upgrade_hint,
)

__all__ = [
    "RowStatus",
    "TransparencyRow",
    "build_transparency_rows",
    "format_money",
    "render_breakdown_text",
    "render_contact_sales",
    "render_upgrade_hint",
]
