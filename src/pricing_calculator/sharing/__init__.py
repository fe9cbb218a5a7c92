"""Shareable link encoding and decoding."""

from pricing_calculator.sharing.links import (
    SHARE_KEYS,
    build_share_link,
    decode_share_query,
    encode_share_query,
)

__all__ = [
    "SHARE_KEYS",
    "build_share_link",
    "decode_share_query",
    "encode_share_query",
]
