"""Prometheus metrics instrumentation for the pricing service.

Provides:
- ``setup_metrics(app)``: Attach prometheus-fastapi-instrumentator to a FastAPI app,
  exposing ``/metrics`` with HTTP request duration/count plus custom business counters.
- ``QUOTES_SERVED``: Counter of served quotes, labelled by the chosen tier.
- ``SALES_ESCALATIONS``: Counter of quotes whose sources must go through sales.
- ``UPGRADE_RECOMMENDATIONS``: Counter of quotes that recommended the next tier.

Business metrics are updated once per served quote by ``record_quote``.
"""

from __future__ import annotations

from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator

from pricing_calculator.pricing.models import Quote

QUOTES_SERVED: Counter = Counter(
    "pricing_quotes_served_total",
    "Number of quotes served, by chosen tier",
    ["tier_id"],
)

SALES_ESCALATIONS: Counter = Counter(
    "pricing_contact_sales_total",
    "Number of quotes whose extra sources require contacting sales",
)

UPGRADE_RECOMMENDATIONS: Counter = Counter(
    "pricing_upgrade_recommendations_total",
    "Number of quotes that recommended moving to the next tier",
)


def record_quote(quote: Quote) -> None:
    """Update the business counters for one served quote."""
    QUOTES_SERVED.labels(tier_id=quote.result.tier.id).inc()
    if quote.result.source_addon.contact_sales:
        SALES_ESCALATIONS.inc()
    if quote.recommendation is not None:
        UPGRADE_RECOMMENDATIONS.inc()


def setup_metrics(app: FastAPI) -> None:
    """Instrument *app* with Prometheus HTTP metrics and expose ``/metrics``.

    Excludes health/ready/metrics endpoints from instrumentation to avoid
    noise in dashboards.

    Args:
        app: The FastAPI application to instrument.
    """
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/health", "/ready", "/metrics"],
    ).instrument(app).expose(app, include_in_schema=False, should_gzip=True)
