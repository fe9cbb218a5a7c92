"""Shareable calculator links.

A link carries the user's inputs as short query keys so the same quote can be
reproduced later::

    https://example.com/pricing?n=10&p=0&c=2&d=3&q=standard&s=5

The media count is only written (as ``m``) when it is above one, so
single-medium links keep the short form. Links without the ``n`` key are
ignored entirely.
"""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from pricing_calculator.domain.models import UsageRequest

# Query key -> raw input name understood by the normalizer
SHARE_KEYS: dict[str, str] = {
    "n": "newsletters",
    "p": "podcasts",
    "c": "channels",
    "d": "days_per_week",
    "q": "quality_level",
    "s": "sources_per_medium",
    "m": "media_count",
}


def encode_share_query(request: UsageRequest) -> str:
    """Encode a request as a share-link query string (without ``?``)."""
    params: dict[str, object] = {
        "n": request.newsletters,
        "p": request.podcasts,
        "c": request.channels,
        "d": request.days_per_week,
        "q": request.quality_level.value,
        "s": request.sources_per_medium,
    }
    if request.media_count > 1:
        params["m"] = request.media_count
    return urlencode(params)


def build_share_link(base_url: str, request: UsageRequest) -> str:
    """Return *base_url* with the request encoded in its query string.

    Any existing query or fragment on *base_url* is replaced.
    """
    parts = urlsplit(base_url)
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, encode_share_query(request), "")
    )


def decode_share_query(query: str | Mapping[str, str]) -> dict[str, str]:
    """Decode share-link parameters into raw normalizer input.

    Args:
        query: A query string (with or without leading ``?``) or an already
            parsed mapping of query parameters.

    Returns:
        Raw inputs keyed by normalizer field name, or an empty dict when the
        link does not carry the ``n`` key.
    """
    if isinstance(query, str):
        parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
        params = {key: values[0] for key, values in parsed.items()}
    else:
        params = dict(query)

    if "n" not in params:
        return {}

    return {field: params[key] for key, field in SHARE_KEYS.items() if key in params}
