"""Tests for the command-line quote tool."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.cli import build_parser, format_json, format_text, main
from pricing_calculator.domain.models import UsageRequest
from pricing_calculator.pricing.quote import build_quote


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestBuildParser:
    """Tests for argument defaults."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.newsletters == "0"
        assert args.media_count == "1"
        assert args.quality == "standard"
        assert args.output_format == "text"
        assert args.share_base_url is None

    def test_rejects_unknown_quality(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--quality", "premium"])


class TestFormatters:
    """Tests for text and JSON output."""

    def test_text_report(self, catalog: PricingCatalog, pro_request: UsageRequest) -> None:
        text = format_text(build_quote(pro_request, catalog), catalog)

        assert text.startswith("Pricing – Tier 2 – Pro")
        assert (
            "Why Tier 2 – Pro:\n"
            "  - Newsletters: 10 > 8 included\n"
            "  - Messaging: 24 channel-days > 8 included"
        ) in text
        assert "Upgrade:" not in text
        assert "Link:" not in text

    def test_text_report_with_hints_and_link(self, catalog: PricingCatalog) -> None:
        request = UsageRequest(sources_per_medium=25)
        text = format_text(build_quote(request, catalog), catalog, "https://example.com/p")

        assert "Note: Sources > 20 per medium" in text
        assert text.endswith("Link: https://example.com/p?n=0&p=0&c=0&d=0&q=standard&s=25")

    def test_json_report(self, catalog: PricingCatalog, pro_request: UsageRequest) -> None:
        payload = json.loads(format_json(build_quote(pro_request, catalog)))
        assert payload["result"]["tier"]["id"] == "T2"
        assert payload["recommendation"] is None


class TestMain:
    """End-to-end runs of the CLI entry point."""

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--newsletters", "10", "--channels", "2", "--days-per-week", "3"])

        out = capsys.readouterr().out
        assert "Base: Tier 2 – Pro = 1.700 €" in out
        assert "Total monthly: 1.700 €" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--podcasts", "5", "--quality", "custom", "--format", "json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["result"]["tier"]["id"] == "T2"
        assert payload["result"]["quality_addon"]["amount"] == "550.00"

    def test_lenient_numbers(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--newsletters", "12abc", "--media-count", "0", "--format", "json"])

        request = json.loads(capsys.readouterr().out)["result"]["request"]
        assert request["newsletters"] == 12
        assert request["media_count"] == 1

    def test_upgrade_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--sources", "20", "--quality", "custom"])

        assert "Upgrade: For 275 € more per month" in capsys.readouterr().out

    def test_custom_catalog_path(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "missing.yaml"

        with pytest.raises(SystemExit) as exc_info:
            main(["--catalog", str(path)])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Invalid pricing catalog" in captured.err
        assert "not found" in captured.err
