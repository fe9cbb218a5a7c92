"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables, a cached ``get_settings()`` accessor, and a
``validate_catalog_path()`` startup gate that enforces the presence of the
tier catalog in production mode.

IMPORTANT: This module has ZERO imports from the ``pricing_calculator``
package to prevent circular imports.  Only stdlib, pydantic,
pydantic_settings, and structlog are used.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    # -- Pricing ---------------------------------------------------------------
    catalog_path: Path = Path("config/catalog.yaml")

    # -- Share links -----------------------------------------------------------
    public_base_url: str = "http://localhost:8000/"


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)


def validate_catalog_path(settings: Settings) -> bool:
    """Check that the configured tier catalog file exists.

    In **production** mode (``settings.production is True``), the application
    exits with a clear error block when the catalog is missing.

    In **development** mode, a missing catalog is logged as a warning and the
    caller falls back to the bundled default catalog.

    Args:
        settings: The loaded application settings.

    Returns:
        ``True`` if the configured catalog file exists, ``False`` otherwise
        (development mode only).
    """
    catalog_path = settings.catalog_path.expanduser()
    if catalog_path.exists():
        logger.info("catalog_path_validated", path=str(catalog_path))
        return True

    if settings.production:
        logger.error("catalog_missing", path=str(catalog_path))
        print("\n=== STARTUP FAILED ===", file=sys.stderr)
        print(f"Tier catalog not found: {catalog_path}", file=sys.stderr)
        print("======================\n", file=sys.stderr)
        sys.exit(1)

    logger.warning("catalog_missing_dev", path=str(catalog_path))
    return False
