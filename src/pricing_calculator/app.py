"""Application entry point serving the pricing calculator over HTTP.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **Request IDs** bound into every log entry and echoed as ``X-Request-ID``
- **Prometheus metrics** on ``/metrics`` (HTTP traffic plus quotes per tier)
- **Tier catalog** loaded once at startup and shared read-only via ``app.state``
- **Quote routes** (``/quote``, ``/catalog``) and health probes (``/health``, ``/ready``)
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from pricing_calculator.api import router as quote_router
from pricing_calculator.catalog.loader import DEFAULT_CATALOG_PATH, load_catalog
from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.config import Settings, get_settings, validate_catalog_path
from pricing_calculator.domain.errors import CatalogError
from pricing_calculator.health import register_health_routes
from pricing_calculator.observability.logs import configure_logging
from pricing_calculator.observability.metrics import setup_metrics
from pricing_calculator.observability.middleware import RequestIdMiddleware

logger = structlog.get_logger()


def load_configured_catalog(settings: Settings) -> PricingCatalog | None:
    """Load the catalog named in *settings*, or the bundled default.

    In development a missing or invalid catalog is logged and ``None`` is
    returned so the service still starts (``/ready`` then reports 503). In
    production an invalid catalog aborts startup.

    Args:
        settings: Application settings.

    Returns:
        The loaded catalog, or ``None`` in development when loading failed.

    Raises:
        CatalogError: In production mode, if the catalog is invalid.
    """
    path = settings.catalog_path.expanduser()
    if not validate_catalog_path(settings):
        path = DEFAULT_CATALOG_PATH

    try:
        return load_catalog(path)
    except CatalogError as exc:
        logger.error("catalog_load_failed", path=str(path), detail=exc.detail)
        if settings.production:
            raise
        return None


def create_app(
    settings: Settings | None = None,
    catalog: PricingCatalog | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings.  If ``None``, ``get_settings()`` is used.
        catalog: Pre-loaded catalog.  If ``None``, the catalog is loaded from
            ``settings.catalog_path`` during application startup.

    Returns:
        The configured application.
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if app.state.catalog is None:
            app.state.catalog = load_configured_catalog(settings)
        logger.info("pricing_service_started", production=settings.production)
        yield

    app = FastAPI(title="Pricing Calculator", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalog = catalog

    app.add_middleware(RequestIdMiddleware)
    app.include_router(quote_router)
    register_health_routes(app)
    setup_metrics(app)
    return app


def main() -> None:
    """Run the pricing service with uvicorn."""
    settings = get_settings()
    configure_logging(production=settings.production)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
