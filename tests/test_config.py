"""Tests for centralized Settings, catalog path validation, and get_settings cache.

Covers: defaults, env-override, production catalog gate, dev-mode fallback,
and lru_cache behavior.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pricing_calculator.config import Settings, get_settings, validate_catalog_path

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Clear get_settings lru_cache before each test."""
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Settings defaults
# ---------------------------------------------------------------------------

class TestSettingsDefaults:
    """Verify that Settings fields have the expected default values."""

    def test_settings_defaults(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.production is False
        assert s.host == "127.0.0.1"
        assert s.port == 8000
        assert s.catalog_path == Path("config/catalog.yaml")
        assert s.public_base_url == "http://localhost:8000/"

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRODUCTION", "true")
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("CATALOG_PATH", "/etc/pricing/catalog.yaml")
        monkeypatch.setenv("PUBLIC_BASE_URL", "https://example.com/pricing")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.production is True
        assert s.port == 9090
        assert s.catalog_path == Path("/etc/pricing/catalog.yaml")
        assert s.public_base_url == "https://example.com/pricing"


# ---------------------------------------------------------------------------
# Catalog path validation
# ---------------------------------------------------------------------------

class TestValidateCatalogPath:
    """Verify validate_catalog_path behaviour in production and dev modes."""

    def test_production_missing_catalog_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Production mode exits when the catalog file is missing."""
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            production=True,
            catalog_path=tmp_path / "missing.yaml",
        )

        with pytest.raises(SystemExit) as exc_info:
            validate_catalog_path(settings)

        assert exc_info.value.code == 1
        assert "STARTUP FAILED" in capsys.readouterr().err

    def test_production_existing_catalog(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "catalog.yaml"
        catalog_file.write_text("tiers: []\n")
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            production=True,
            catalog_path=catalog_file,
        )

        assert validate_catalog_path(settings) is True

    def test_dev_mode_missing_catalog_returns_false(self, tmp_path: Path) -> None:
        """Dev mode logs a warning but does NOT exit."""
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
            production=False,
            catalog_path=tmp_path / "missing.yaml",
        )

        assert validate_catalog_path(settings) is False


# ---------------------------------------------------------------------------
# get_settings cache
# ---------------------------------------------------------------------------

class TestGetSettingsCached:
    """Verify lru_cache on get_settings."""

    def test_get_settings_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Calling get_settings() twice returns the exact same object."""
        monkeypatch.delenv("PRODUCTION", raising=False)

        first = get_settings()
        second = get_settings()

        assert first is second

    def test_invalid_settings_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")

        with pytest.raises(SystemExit) as exc_info:
            get_settings()

        assert exc_info.value.code == 1
