"""FastAPI routes exposing the pricing calculator over HTTP.

``GET /quote`` accepts the same short query keys as share links, so a shared
link can be priced directly. ``POST /quote`` accepts raw input field names in
a JSON body. Both run the inputs through the normalizer before pricing.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Body, HTTPException, Request
from pydantic import BaseModel, ConfigDict

from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.intake.normalizer import normalize_inputs
from pricing_calculator.observability.metrics import record_quote
from pricing_calculator.presentation.breakdown import (
    TransparencyRow,
    build_transparency_rows,
    render_breakdown_text,
    render_contact_sales,
    render_upgrade_hint,
)
from pricing_calculator.pricing.models import PricingResult, Quote, UpgradeRecommendation
from pricing_calculator.pricing.quote import build_quote
from pricing_calculator.sharing.links import build_share_link, decode_share_query

logger = structlog.get_logger()

router = APIRouter()


class QuoteResponse(BaseModel):
    """Quote plus everything a client needs to display it."""

    model_config = ConfigDict(frozen=True)

    result: PricingResult
    recommendation: UpgradeRecommendation | None
    share_link: str
    breakdown_text: str
    transparency: list[TransparencyRow]
    upgrade_hint: str | None
    contact_sales: str | None


def build_quote_response(
    quote: Quote, catalog: PricingCatalog, base_url: str
) -> QuoteResponse:
    """Attach presentation text and a share link to a computed quote.

    Args:
        quote: The computed quote.
        catalog: Catalog providing display and ceiling settings.
        base_url: Public URL the share link should point at.

    Returns:
        The complete response payload.
    """
    currency = catalog.display.currency
    return QuoteResponse(
        result=quote.result,
        recommendation=quote.recommendation,
        share_link=build_share_link(base_url, quote.result.request),
        breakdown_text=render_breakdown_text(quote.result, catalog.display),
        transparency=build_transparency_rows(quote.result, currency),
        upgrade_hint=render_upgrade_hint(quote.recommendation, currency),
        contact_sales=render_contact_sales(
            quote.result, catalog.sources.max_sources_per_medium
        ),
    )


def _catalog(request: Request) -> PricingCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="Tier catalog not loaded")
    return catalog


def _base_url(request: Request) -> str:
    settings = getattr(request.app.state, "settings", None)
    if settings is not None:
        return settings.public_base_url
    return str(request.base_url)


def _respond(request: Request, raw: dict[str, Any]) -> QuoteResponse:
    catalog = _catalog(request)
    usage = normalize_inputs(raw)
    quote = build_quote(usage, catalog)
    record_quote(quote)
    logger.info(
        "quote_served",
        path=request.url.path,
        tier_id=quote.result.tier.id,
        total_monthly=quote.result.total_monthly,
    )
    return build_quote_response(quote, catalog, _base_url(request))


@router.get("/quote", response_model=QuoteResponse)
async def get_quote(request: Request) -> QuoteResponse:
    """Price the inputs encoded in share-link query keys (``n``, ``p``, ...).

    Without the ``n`` key the link is ignored and an empty request is priced.
    """
    raw = decode_share_query(dict(request.query_params))
    return _respond(request, raw)


@router.post("/quote", response_model=QuoteResponse)
async def post_quote(
    request: Request, payload: dict[str, Any] | None = Body(default=None)
) -> QuoteResponse:
    """Price raw inputs given by field name (``newsletters``, ``podcasts``, ...)."""
    return _respond(request, payload or {})


@router.get("/catalog", response_model=PricingCatalog)
async def get_catalog(request: Request) -> PricingCatalog:
    """Return the loaded tier catalog."""
    return _catalog(request)
