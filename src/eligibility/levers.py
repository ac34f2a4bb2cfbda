"""Funding lever generator.

Once the hard facts are in and the shortlist is still thin, suggest profile
changes the applicant could make to open up more lenders. Advisory strings
only; the profile is never modified.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from src.conversation.flow import has_hard_requirements
from src.formatters import format_rand_full
from src.schemas.eligibility import BusinessProfile, MatchBuckets

DEFAULT_TARGET_MATCHES = 3
AMOUNT_LEVER_FACTOR = Decimal("0.75")
TIGHT_URGENCY_DAYS = 2


def _round_to_thousand(value: Decimal) -> Decimal:
    return (value / 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP) * 1000


def compute_levers(
    profile: BusinessProfile,
    buckets: MatchBuckets,
    target: int = DEFAULT_TARGET_MATCHES,
) -> list[str]:
    """Return lever suggestions, or an empty list when none are due.

    Levers are only offered when every hard requirement is known and fewer
    than ``target`` lenders qualify.
    """
    if not has_hard_requirements(profile):
        return []
    if len(buckets.qualified) >= target:
        return []

    levers: list[str] = []

    # 1. Smaller ask
    _amount_lever(profile, levers)

    # 2. More time
    _urgency_lever(profile, levers)

    # 3. Collateral
    _collateral_lever(profile, levers)

    return levers


def _amount_lever(profile: BusinessProfile, levers: list[str]) -> None:
    """Suggest asking for 75% of the current amount, rounded to the nearest thousand."""
    if profile.amount_requested is None:
        return
    reduced = _round_to_thousand(profile.amount_requested * AMOUNT_LEVER_FACTOR)
    if reduced <= 0:
        return
    levers.append(
        f"If we drop the request to {format_rand_full(reduced)}, more lenders may open up."
    )


def _urgency_lever(profile: BusinessProfile, levers: list[str]) -> None:
    """Very tight deadlines rule out the slower, often cheaper lenders."""
    if profile.urgency_days is None or profile.urgency_days > TIGHT_URGENCY_DAYS:
        return
    levers.append(
        f"Needing funds within {profile.urgency_days} day{'s' if profile.urgency_days != 1 else ''} "
        f"limits the field; allowing a week brings in lenders that take longer to pay out."
    )


def _collateral_lever(profile: BusinessProfile, levers: list[str]) -> None:
    if profile.collateral_acceptable is not False:
        return
    levers.append(
        "Being open to offering collateral would let secured lenders consider the application."
    )
