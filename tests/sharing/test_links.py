"""Tests for shareable calculator links."""

from pricing_calculator.domain.models import UsageRequest
from pricing_calculator.domain.types import QualityLevel
from pricing_calculator.intake.normalizer import normalize_inputs
from pricing_calculator.sharing.links import (
    SHARE_KEYS,
    build_share_link,
    decode_share_query,
    encode_share_query,
)


class TestEncode:
    """Tests for building share links."""

    def test_encode_query(self, pro_request: UsageRequest):
        assert encode_share_query(pro_request) == "n=10&p=0&c=2&d=3&q=standard&s=5"

    def test_single_medium_omits_media_key(self):
        query = encode_share_query(UsageRequest())
        assert {pair.split("=")[0] for pair in query.split("&")} == set(SHARE_KEYS) - {"m"}

    def test_media_count_shared_above_one(self):
        query = encode_share_query(UsageRequest(media_count=3))
        assert query == "n=0&p=0&c=0&d=0&q=standard&s=0&m=3"

    def test_build_link(self, pro_request: UsageRequest):
        link = build_share_link("https://example.com/pricing", pro_request)
        assert link == "https://example.com/pricing?n=10&p=0&c=2&d=3&q=standard&s=5"

    def test_build_link_replaces_existing_query_and_fragment(self):
        request = UsageRequest(quality_level=QualityLevel.CUSTOM)
        link = build_share_link("https://example.com/pricing?n=99&x=1#calc", request)
        assert link == "https://example.com/pricing?n=0&p=0&c=0&d=0&q=custom&s=0"


class TestDecode:
    """Tests for reading share links."""

    def test_decode_query_string(self):
        raw = decode_share_query("?n=10&p=0&c=2&d=3&q=standard&s=5")
        assert raw == {
            "newsletters": "10",
            "podcasts": "0",
            "channels": "2",
            "days_per_week": "3",
            "quality_level": "standard",
            "sources_per_medium": "5",
        }

    def test_decode_mapping(self):
        raw = decode_share_query({"n": "4", "q": "extended", "utm_source": "mail"})
        assert raw == {"newsletters": "4", "quality_level": "extended"}

    def test_missing_n_ignores_link(self):
        assert decode_share_query("p=3&c=2") == {}
        assert decode_share_query("") == {}

    def test_blank_n_still_counts(self):
        assert decode_share_query("n=&p=2") == {"newsletters": "", "podcasts": "2"}

    def test_link_reproduces_request(self, pro_request: UsageRequest):
        link = build_share_link("https://example.com/pricing", pro_request)
        query = link.split("?", 1)[1]
        assert normalize_inputs(decode_share_query(query)) == pro_request

    def test_link_reproduces_multi_media_request(self):
        request = UsageRequest(media_count=3, newsletters=20, sources_per_medium=4)
        link = build_share_link("https://example.com/pricing", request)
        query = link.split("?", 1)[1]
        assert decode_share_query(query)["media_count"] == "3"
        assert normalize_inputs(decode_share_query(query)) == request
