"""Domain-specific exception classes for the pricing calculator."""

from pathlib import Path


class PricingCalculatorError(Exception):
    """Base class for all domain errors in the pricing calculator."""


class CatalogError(PricingCalculatorError):
    """Raised when a tier catalog cannot be loaded or fails validation.

    Attributes:
        path: The catalog file that was being loaded, if any.
        detail: Description of what is wrong with the catalog.
    """

    def __init__(self, detail: str, path: Path | None = None) -> None:
        self.path = path
        self.detail = detail
        location = f" ({path})" if path is not None else ""
        super().__init__(f"Invalid pricing catalog{location}: {detail}")


class UnknownTierError(PricingCalculatorError):
    """Raised when a tier id cannot be found in the supplied catalog.

    Attributes:
        tier_id: The tier id that was looked up.
    """

    def __init__(self, tier_id: str) -> None:
        self.tier_id = tier_id
        super().__init__(f"Tier '{tier_id}' is not part of the catalog")
