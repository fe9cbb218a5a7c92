"""Command-line quote tool.

Prices a single usage estimate against the tier catalog and prints either a
human-readable breakdown (default) or the full quote as JSON.

Usage::

    python -m pricing_calculator.cli --newsletters 10 --channels 2 --days-per-week 3
    python -m pricing_calculator.cli --podcasts 5 --quality extended --format json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pricing_calculator.catalog.loader import DEFAULT_CATALOG_PATH, load_catalog
from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.domain.errors import CatalogError
from pricing_calculator.domain.types import QualityLevel
from pricing_calculator.intake.normalizer import normalize_inputs
from pricing_calculator.observability.logs import configure_logging
from pricing_calculator.presentation.breakdown import (
    render_breakdown_text,
    render_contact_sales,
    render_upgrade_hint,
)
from pricing_calculator.pricing.models import Quote
from pricing_calculator.pricing.quote import build_quote
from pricing_calculator.sharing.links import build_share_link


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for quote requests.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(description="Price a media-distribution subscription")

    parser.add_argument("--newsletters", type=str, default="0", help="Newsletters per month")
    parser.add_argument("--podcasts", type=str, default="0", help="Podcasts per month")
    parser.add_argument("--channels", type=str, default="0", help="Messaging channels")
    parser.add_argument(
        "--days-per-week",
        type=str,
        default="0",
        help="Active messaging days per week",
    )
    parser.add_argument(
        "--quality",
        type=str,
        choices=[level.value for level in QualityLevel],
        default=QualityLevel.STANDARD.value,
        help="Content-quality setup level (default: standard)",
    )
    parser.add_argument("--sources", type=str, default="0", help="Sources per medium")
    parser.add_argument(
        "--media-count",
        type=str,
        default="1",
        help="Number of media the allowances apply to (default: 1)",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=str(DEFAULT_CATALOG_PATH),
        help="Path to the tier catalog YAML file",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        dest="output_format",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--share-base-url",
        type=str,
        default=None,
        help="Print a shareable link rooted at this URL",
    )

    return parser


def format_text(
    quote: Quote,
    catalog: PricingCatalog,
    share_base_url: str | None = None,
) -> str:
    """Format a quote as a human-readable report.

    Includes the breakdown, why cheaper tiers were skipped, and any upgrade
    or contact-sales hints.

    Args:
        quote: The computed quote.
        catalog: Catalog providing display and ceiling settings.
        share_base_url: If given, a share link for the inputs is appended.

    Returns:
        Multi-line report string.
    """
    result = quote.result
    currency = catalog.display.currency
    sections = [render_breakdown_text(result, catalog.display)]

    reasons = "\n".join(f"  - {reason}" for reason in result.rejection_trace)
    sections.append(f"Why {result.tier.name}:\n{reasons}")

    hint = render_upgrade_hint(quote.recommendation, currency)
    if hint:
        sections.append(f"Upgrade: {hint}")

    sales = render_contact_sales(result, catalog.sources.max_sources_per_medium)
    if sales:
        sections.append(f"Note: {sales}")

    if share_base_url:
        sections.append(f"Link: {build_share_link(share_base_url, result.request)}")

    return "\n\n".join(sections)


def format_json(quote: Quote) -> str:
    """Format a quote as a JSON string.

    Args:
        quote: The computed quote.

    Returns:
        Pretty-printed JSON string.
    """
    return quote.model_dump_json(indent=2)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, price the request, and print the quote."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(stream=sys.stderr, level=logging.WARNING)

    try:
        catalog = load_catalog(Path(args.catalog))
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    request = normalize_inputs(
        {
            "newsletters": args.newsletters,
            "podcasts": args.podcasts,
            "channels": args.channels,
            "days_per_week": args.days_per_week,
            "quality_level": args.quality,
            "sources_per_medium": args.sources,
            "media_count": args.media_count,
        }
    )
    quote = build_quote(request, catalog)

    output = (
        format_json(quote)
        if args.output_format == "json"
        else format_text(quote, catalog, args.share_base_url)
    )
    print(output)


if __name__ == "__main__":
    main()
