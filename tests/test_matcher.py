"""Tests for catalog-wide matching: bucketing, ranking and tolerance of bad records."""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.eligibility import PRODUCTS, match_all
from src.models.enums import ProductType
from src.schemas.eligibility import BusinessProfile, LenderProduct, MatchBuckets


def _profile(**overrides) -> BusinessProfile:
    data = {
        "industry": "Construction",
        "years_trading": 5,
        "monthly_turnover": 100_000,
        "amount_requested": 1_000_000,
        "sa_registered": True,
        "sa_director": True,
        "bank_statements": True,
        "province": "Gauteng",
        "vat_registered": True,
    }
    data.update(overrides)
    return BusinessProfile(**data)


def _product(product_id: str, **overrides) -> LenderProduct:
    data = {
        "id": product_id,
        "provider": product_id.title(),
        "product_type": ProductType.WORKING_CAPITAL,
        "amount_min": 50_000,
        "amount_max": 150_000,
        "min_years": 1,
        "min_monthly_turnover": 100_000,
        "speed_days": (2, 3),
    }
    data.update(overrides)
    return LenderProduct(**data)


class TestSeedCatalog:
    """Established construction business asking R1M against the built-in lenders."""

    @pytest.fixture()
    def buckets(self):
        return match_all(_profile(), PRODUCTS)

    def test_every_product_lands_in_one_bucket(self, buckets):
        total = len(buckets.qualified) + len(buckets.need_more_info) + len(buckets.not_qualified)
        assert total == len(PRODUCTS)

    def test_qualified_ranked(self, buckets):
        # Lulalend scores 1.0; Merchant Capital loses 0.05 for thin turnover
        assert [p.id for p in buckets.qualified] == ["lulalend-term", "merchant-capital-mca"]

    def test_close_matches(self, buckets):
        assert sorted(m.product.id for m in buckets.need_more_info) == ["grobank-term", "spark-asset"]

    def test_counts(self, buckets):
        assert buckets.counts == {"qualified": 2, "needMoreInfo": 2, "notQualified": 6}

    def test_not_qualified_have_no_improvements(self, buckets):
        assert all(m.improvements == [] for m in buckets.not_qualified)
        assert all(m.reasons for m in buckets.not_qualified)


class TestRanking:
    @pytest.fixture()
    def profile(self):
        return BusinessProfile(
            years_trading=4,
            monthly_turnover=300_000,
            amount_requested=100_000,
            sa_registered=True,
            bank_statements=True,
        )

    def test_score_then_speed(self, profile):
        edge = _product("edge", amount_min=95_000, amount_max=1_000_000, speed_days=(1, 1))
        slow = _product("slow", speed_days=(5, 7))
        fast = _product("fast", speed_days=(2, 3))

        buckets = match_all(profile, [edge, slow, fast])

        assert [p.id for p in buckets.qualified] == ["fast", "slow", "edge"]

    def test_thin_turnover_ranks_lower(self, profile):
        thin = _product("thin", min_monthly_turnover=250_000, speed_days=(1, 1))
        roomy = _product("roomy", speed_days=(4, 5))

        buckets = match_all(profile, [thin, roomy])

        assert [p.id for p in buckets.qualified] == ["roomy", "thin"]

    def test_urgency_penalty(self):
        urgent = BusinessProfile(
            years_trading=4,
            monthly_turnover=300_000,
            amount_requested=100_000,
            sa_registered=True,
            bank_statements=True,
            urgency_days=2,
        )
        slow = _product("slow", speed_days=(5, 7))
        quick = _product("quick", speed_days=(2, 4))

        buckets = match_all(urgent, [slow, quick])

        # Urgency only affects order, never eligibility
        assert [p.id for p in buckets.qualified] == ["quick", "slow"]
        assert buckets.need_more_info == []


class TestTolerantCatalog:
    def test_none_catalog(self):
        assert match_all(_profile(), None).model_dump() == MatchBuckets().model_dump()

    def test_empty_catalog(self):
        assert match_all(_profile(), []).counts == {"qualified": 0, "needMoreInfo": 0, "notQualified": 0}

    def test_non_iterable_catalog(self):
        assert match_all(_profile(), 42).model_dump() == MatchBuckets().model_dump()

    def test_malformed_records_skipped(self):
        good = _product("good", amount_min=20_000, amount_max=2_000_000, min_monthly_turnover=50_000)
        catalog = [
            good,
            {"id": "half-a-record"},
            "not a record",
            {
                "id": "reversed",
                "provider": "Reversed",
                "productType": "Term Loan",
                "amountMin": 500_000,
                "amountMax": 100_000,
                "minYears": 1,
                "minMonthlyTurnover": 0,
                "speedDays": [1, 2],
            },
        ]

        buckets = match_all(_profile(), catalog)

        assert [p.id for p in buckets.qualified] == ["good"]
        assert buckets.need_more_info == []
        assert buckets.not_qualified == []

    def test_constructed_invalid_product_skipped(self):
        broken = LenderProduct.model_construct(
            id="broken",
            provider="Broken",
            product_type=ProductType.TERM_LOAN,
            amount_min=Decimal("0"),
            amount_max=Decimal("100"),
            min_years=0.0,
            min_monthly_turnover=Decimal("0"),
            speed_days=(1, 2),
        )
        good = _product("good", amount_min=20_000, amount_max=2_000_000, min_monthly_turnover=50_000)

        buckets = match_all(_profile(), [broken, good])

        assert [p.id for p in buckets.qualified] == ["good"]

    def test_wrongly_typed_amount_skipped(self):
        # A float bound cannot be mixed with Decimal arithmetic while scoring
        broken = LenderProduct.model_construct(
            id="float-bounds",
            provider="Float Bounds",
            product_type=ProductType.TERM_LOAN,
            amount_min=20000.0,
            amount_max=Decimal("2000000"),
            min_years=1.0,
            min_monthly_turnover=Decimal("50000"),
            speed_days=(2, 3),
        )
        good = _product("good", amount_min=20_000, amount_max=2_000_000, min_monthly_turnover=50_000)

        buckets = match_all(_profile(), [broken, good])

        assert [p.id for p in buckets.qualified] == ["good"]
        assert buckets.counts == {"qualified": 1, "needMoreInfo": 0, "notQualified": 0}

    def test_null_province_entry_skipped(self):
        broken = LenderProduct.model_construct(
            id="null-province",
            provider="Null Province",
            product_type=ProductType.TERM_LOAN,
            amount_min=Decimal("20000"),
            amount_max=Decimal("2000000"),
            min_years=1.0,
            min_monthly_turnover=Decimal("50000"),
            speed_days=(2, 3),
            provinces_allowed=("Limpopo", None),
        )
        good = _product("good", amount_min=20_000, amount_max=2_000_000, min_monthly_turnover=50_000)

        buckets = match_all(_profile(), [good, broken])

        assert [p.id for p in buckets.qualified] == ["good"]
        assert buckets.counts == {"qualified": 1, "needMoreInfo": 0, "notQualified": 0}

    def test_camel_case_record(self):
        record = {
            "id": "dict-lender",
            "provider": "Dict Lender",
            "productType": "Term Loan",
            "amountMin": 20_000,
            "amountMax": 2_000_000,
            "minYears": 1,
            "minMonthlyTurnover": 50_000,
            "vatRequired": False,
            "speedDays": [2, 3],
        }
        buckets = match_all(_profile(), [record])
        assert [p.id for p in buckets.qualified] == ["dict-lender"]


class TestSerialization:
    def test_camel_case_keys(self):
        dumped = match_all(_profile(), PRODUCTS).model_dump(by_alias=True)
        assert set(dumped) == {"qualified", "needMoreInfo", "notQualified"}
        assert "amountMin" in dumped["qualified"][0]

    def test_money_as_json_numbers(self):
        dumped = match_all(_profile(), PRODUCTS).model_dump(mode="json", by_alias=True)
        top = dumped["qualified"][0]
        assert top["amountMin"] == 20000
        assert isinstance(top["amountMax"], int)
        assert isinstance(top["minMonthlyTurnover"], int)

    def test_fractional_rand_stays_numeric(self):
        profile = _profile(monthly_turnover=Decimal("150000.50"))
        dumped = profile.model_dump(mode="json", by_alias=True)
        assert dumped["monthlyTurnover"] == 150000.5
        assert dumped["amountRequested"] == 1000000

    def test_python_dump_keeps_decimal(self):
        assert isinstance(_profile().model_dump()["monthly_turnover"], Decimal)

    def test_score_never_exposed(self):
        dumped = match_all(_profile(), PRODUCTS).model_dump(mode="json", by_alias=True)
        assert all("score" not in product for product in dumped["qualified"])

    def test_profile_unchanged(self):
        profile = _profile(bank_statements=None)
        before = profile.model_dump()
        match_all(profile, PRODUCTS)
        assert profile.model_dump() == before
