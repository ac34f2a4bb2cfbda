"""Tests for funding lever suggestions."""

from __future__ import annotations

import pytest

from src.eligibility import PRODUCTS, compute_levers, match_all
from src.schemas.eligibility import BusinessProfile, MatchBuckets


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


AMOUNT_LEVER = "If we drop the request to R750,000, more lenders may open up."


class TestGating:
    def test_hard_requirements_unknown(self):
        profile = _profile(vat_registered=None)
        assert compute_levers(profile, MatchBuckets()) == []

    def test_enough_qualified(self):
        buckets = MatchBuckets(qualified=list(PRODUCTS[:3]))
        assert compute_levers(_profile(), buckets) == []

    def test_custom_target(self):
        buckets = MatchBuckets(qualified=list(PRODUCTS[:3]))
        assert compute_levers(_profile(), buckets, target=4) == [AMOUNT_LEVER]

    def test_thin_shortlist(self):
        buckets = match_all(_profile(), PRODUCTS)
        assert len(buckets.qualified) == 2
        assert compute_levers(_profile(), buckets) == [AMOUNT_LEVER]


class TestAmountLever:
    def test_rounds_half_up_to_thousand(self):
        # 1,002,000 * 0.75 = 751,500
        levers = compute_levers(_profile(amount_requested=1_002_000), MatchBuckets())
        assert levers[0] == "If we drop the request to R752,000, more lenders may open up."

    def test_tiny_amount_yields_no_lever(self):
        # 400 * 0.75 = 300, rounds to 0
        assert compute_levers(_profile(amount_requested=400), MatchBuckets()) == []


class TestUrgencyLever:
    @pytest.mark.parametrize("days", [1, 2])
    def test_tight_deadline(self, days):
        levers = compute_levers(_profile(urgency_days=days), MatchBuckets())
        assert len(levers) == 2
        assert levers[1].startswith(f"Needing funds within {days} day")

    def test_relaxed_deadline(self):
        assert compute_levers(_profile(urgency_days=3), MatchBuckets()) == [AMOUNT_LEVER]


class TestCollateralLever:
    def test_refused(self):
        levers = compute_levers(_profile(collateral_acceptable=False), MatchBuckets())
        assert levers[-1] == (
            "Being open to offering collateral would let secured lenders consider the application."
        )

    def test_unknown_or_accepted(self):
        assert compute_levers(_profile(collateral_acceptable=None), MatchBuckets()) == [AMOUNT_LEVER]
        assert compute_levers(_profile(collateral_acceptable=True), MatchBuckets()) == [AMOUNT_LEVER]


def test_profile_not_modified():
    profile = _profile(urgency_days=1, collateral_acceptable=False)
    before = profile.model_dump()
    compute_levers(profile, MatchBuckets())
    assert profile.model_dump() == before
