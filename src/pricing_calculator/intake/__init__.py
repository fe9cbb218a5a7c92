"""Raw input parsing and range clamping."""

from pricing_calculator.intake.normalizer import (
    DEFAULT_LIMITS,
    InputLimits,
    normalize_inputs,
    parse_int,
    parse_quality,
)

__all__ = [
    "DEFAULT_LIMITS",
    "InputLimits",
    "normalize_inputs",
    "parse_int",
    "parse_quality",
]
