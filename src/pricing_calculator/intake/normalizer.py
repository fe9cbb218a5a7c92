"""Normalize raw user input into a :class:`UsageRequest`.

Raw input comes from form fields, CLI flags or share-link query strings, so
every value may be a string, missing, or out of range. Unparseable numbers
become 0 and every count is clamped to the range the calculator accepts.
"""

import math
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from pricing_calculator.domain.models import UsageRequest
from pricing_calculator.domain.types import QualityLevel


# Longer digit runs are truncated; 15 digits already exceed every input limit
MAX_DIGITS = 15

ASCII_DIGITS = frozenset("0123456789")


class InputLimits(BaseModel):
    """Upper bounds for user-entered counts."""

    model_config = ConfigDict(frozen=True)

    newsletters: int = 500
    podcasts: int = 200
    channels: int = 20
    days_per_week: int = 7
    sources_per_medium: int = 50


DEFAULT_LIMITS = InputLimits()


def parse_int(value: object) -> int:
    """Parse a user-entered integer the lenient way form inputs are read.

    Leading ASCII digits are used (``"12abc"`` -> 12); anything unparseable is 0.
    At most :data:`MAX_DIGITS` digits are read so huge inputs stay cheap to
    convert and still clamp to the upper limit.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if value is None:
        return 0

    text = str(value).strip()
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        # ASCII only: str.isdigit() also accepts "²" and other digits int() rejects
        if char not in ASCII_DIGITS or len(digits) >= MAX_DIGITS:
            break
        digits += char
    return sign * int(digits) if digits else 0


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Clamp *value* into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


def parse_quality(value: object) -> QualityLevel:
    """Parse a quality level, falling back to standard for unknown values."""
    try:
        return QualityLevel(str(value).strip().lower())
    except ValueError:
        return QualityLevel.STANDARD


def normalize_inputs(
    raw: Mapping[str, object],
    limits: InputLimits = DEFAULT_LIMITS,
) -> UsageRequest:
    """Build a range-clamped usage request from raw input values.

    Args:
        raw: Mapping with any of ``newsletters``, ``podcasts``, ``channels``,
            ``days_per_week``, ``quality_level``, ``sources_per_medium`` and
            ``media_count``. Missing keys count as 0 (standard quality, one
            medium).
        limits: Upper bounds for each count.

    Returns:
        A :class:`UsageRequest` with every count inside its range.
    """
    return UsageRequest(
        media_count=max(1, parse_int(raw.get("media_count", 1))),
        newsletters=clamp(parse_int(raw.get("newsletters")), 0, limits.newsletters),
        podcasts=clamp(parse_int(raw.get("podcasts")), 0, limits.podcasts),
        channels=clamp(parse_int(raw.get("channels")), 0, limits.channels),
        days_per_week=clamp(parse_int(raw.get("days_per_week")), 0, limits.days_per_week),
        quality_level=parse_quality(raw.get("quality_level", QualityLevel.STANDARD)),
        sources_per_medium=clamp(
            parse_int(raw.get("sources_per_medium")), 0, limits.sources_per_medium
        ),
    )
