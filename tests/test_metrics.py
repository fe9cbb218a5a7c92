"""Tests for the Prometheus metrics endpoint and quote counters."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from pricing_calculator.app import create_app
from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.config import Settings
from pricing_calculator.observability.metrics import setup_metrics


@pytest.fixture()
def metrics_app() -> FastAPI:
    """Create a minimal FastAPI app with Prometheus instrumentation."""
    app = FastAPI()

    @app.get("/hello")
    async def hello():
        return {"msg": "hello"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get("/ready")
    async def ready():
        return {"status": "ready"}

    setup_metrics(app)
    return app


@pytest.fixture()
def metrics_client(metrics_app: FastAPI) -> TestClient:
    """TestClient for the metrics-enabled app."""
    return TestClient(metrics_app)


@pytest.fixture()
def service_client(catalog: PricingCatalog) -> Iterator[TestClient]:
    """TestClient for the full pricing service."""
    app = create_app(settings=Settings(_env_file=None), catalog=catalog)  # type: ignore[call-arg]
    with TestClient(app) as client:
        yield client


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    """Current value of a sample in the default registry (0 if never observed)."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_metrics_endpoint_returns_prometheus_format(metrics_client: TestClient) -> None:
    """GET /metrics returns 200 with HTTP metrics and the quote counters."""
    metrics_client.get("/hello")
    resp = metrics_client.get("/metrics")
    assert resp.status_code == 200
    body = resp.text
    assert "http_request" in body
    assert "pricing_quotes_served_total" in body
    assert "pricing_contact_sales_total" in body
    assert "pricing_upgrade_recommendations_total" in body


def test_excluded_handlers_not_in_metrics(metrics_client: TestClient) -> None:
    """/health and /ready do not appear as handler labels."""
    metrics_client.get("/health")
    metrics_client.get("/ready")
    body = metrics_client.get("/metrics").text
    lines = [
        line
        for line in body.splitlines()
        if "http_request_duration" in line and 'handler="' in line
    ]
    for line in lines:
        assert '/health"' not in line, f"/health found in metrics: {line}"
        assert '/ready"' not in line, f"/ready found in metrics: {line}"


def test_quotes_served_counts_chosen_tier(service_client: TestClient) -> None:
    """Each served quote increments the counter of the tier it landed in."""
    before_pro = _sample("pricing_quotes_served_total", {"tier_id": "T2"})
    before_starter = _sample("pricing_quotes_served_total", {"tier_id": "T1"})

    service_client.get("/quote?n=10&p=0&c=2&d=3&q=standard&s=5")
    service_client.post("/quote", json={"newsletters": 10, "channels": 2, "days_per_week": 3})

    assert _sample("pricing_quotes_served_total", {"tier_id": "T2"}) == before_pro + 2
    assert _sample("pricing_quotes_served_total", {"tier_id": "T1"}) == before_starter


def test_contact_sales_and_upgrade_counters(service_client: TestClient) -> None:
    """Sales escalations and upgrade recommendations are counted separately."""
    sales_before = _sample("pricing_contact_sales_total")
    upgrades_before = _sample("pricing_upgrade_recommendations_total")

    service_client.post("/quote", json={"sources_per_medium": 25})
    service_client.post("/quote", json={"sources_per_medium": 20, "quality_level": "custom"})

    assert _sample("pricing_contact_sales_total") == sales_before + 1
    assert _sample("pricing_upgrade_recommendations_total") == upgrades_before + 1


def test_service_exposes_metrics(service_client: TestClient) -> None:
    """The pricing service serves /metrics including per-tier quote samples."""
    service_client.get("/quote?n=110")

    resp = service_client.get("/metrics")
    assert resp.status_code == 200
    assert 'pricing_quotes_served_total{tier_id="T3"}' in resp.text
    assert 'handler="/quote"' in resp.text
