"""YAML loader for the tier catalog.

The catalog is the only configuration the pricing core depends on. It is
loaded once, validated by Pydantic, and passed read-only into every pricing
call. Any problem is reported as :class:`CatalogError` at load time so the
pricing functions never see a malformed catalog.
"""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from pricing_calculator.catalog.models import PricingCatalog
from pricing_calculator.domain.errors import CatalogError

logger = structlog.get_logger()

# Resolve from src/pricing_calculator/catalog/ up 3 levels to project root
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[3] / "config" / "catalog.yaml"


def parse_catalog(raw: object, path: Path | None = None) -> PricingCatalog:
    """Validate an already-parsed catalog document.

    Args:
        raw: The mapping produced by ``yaml.safe_load`` (or built in code).
        path: Source file, used only in error messages.

    Returns:
        The validated, immutable catalog.

    Raises:
        CatalogError: If the document is empty or fails validation.
    """
    if raw is None:
        raise CatalogError("catalog document is empty", path)
    if not isinstance(raw, dict):
        raise CatalogError(
            f"catalog document must be a mapping, got {type(raw).__name__}", path
        )

    try:
        return PricingCatalog.model_validate(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise CatalogError(problems, path) from exc


def load_catalog(path: Path = DEFAULT_CATALOG_PATH) -> PricingCatalog:
    """Load and validate the tier catalog from a YAML file.

    Args:
        path: Path to the YAML catalog file.

    Returns:
        The validated catalog.

    Raises:
        CatalogError: If the file is missing, is not valid YAML, is empty, or
            violates the catalog rules (ordering, unique ids, prices).
    """
    if not path.exists():
        raise CatalogError("catalog file not found", path)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise CatalogError(f"invalid YAML: {exc}", path) from exc

    catalog = parse_catalog(raw, path)
    logger.info(
        "catalog_loaded",
        path=str(path),
        tiers=[tier.id for tier in catalog.tiers],
        month_weeks=catalog.month_weeks,
    )
    return catalog
