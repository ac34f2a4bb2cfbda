"""Tests for the province decoder."""

from __future__ import annotations

import pytest

from src.decoders import normalize_province, province_key
from src.models.enums import Province


class TestNormalizeProvince:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Gauteng", Province.GAUTENG),
            ("jhb", Province.GAUTENG),
            ("KZN", Province.KWAZULU_NATAL),
            ("kwazulu natal", Province.KWAZULU_NATAL),
            ("  Cape   Town ", Province.WESTERN_CAPE),
            ("north-west", Province.NORTH_WEST),
            ("Northern Cape", Province.NORTHERN_CAPE),
        ],
    )
    def test_known(self, raw, expected):
        assert normalize_province(raw) is expected

    def test_unknown(self):
        assert normalize_province("Atlantis") is None

    def test_none(self):
        assert normalize_province(None) is None

    def test_every_standard_name(self):
        for province in Province:
            assert normalize_province(province.value) is province


class TestProvinceKey:
    def test_alias_and_standard_share_key(self):
        assert province_key("KZN") == province_key("KwaZulu-Natal") == "KwaZulu-Natal"

    def test_unknown_kept_trimmed(self):
        assert province_key(" Atlantis ") == "Atlantis"
