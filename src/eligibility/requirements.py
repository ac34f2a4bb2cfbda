"""Requirement classification policy.

Single source of truth for how each profile dimension is treated:

- hard: a fact the applicant can't change; a violation disqualifies
- flex: negotiable; a bounded gap becomes an improvement suggestion
- hard_or_none: hard only when the product asks for it, otherwise ignored
- refine: never disqualifies on its own, feeds ranking
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType

from src.models.enums import RequirementPolicy
from src.schemas.eligibility import LenderProduct

# Only the hard_or_none rows are resolved at run time (policy_for). The rule
# registry in rules.py encodes the other policies directly: hard dimensions
# live in HARD_RULES, amount and refine dimensions in FLEX_RULES, urgency
# only in the ranking score.
REQUIREMENT_POLICY: MappingProxyType[str, RequirementPolicy] = MappingProxyType({
    "yearsTrading": RequirementPolicy.HARD,
    "monthlyTurnover": RequirementPolicy.HARD,
    "amountRequested": RequirementPolicy.FLEX,
    "urgencyDays": RequirementPolicy.FLEX,
    "vatRegistered": RequirementPolicy.HARD_OR_NONE,
    "province": RequirementPolicy.HARD,
    "saRegistered": RequirementPolicy.HARD,
    "saDirector": RequirementPolicy.HARD_OR_NONE,
    "bankStatements": RequirementPolicy.HARD,
    "collateralAcceptable": RequirementPolicy.REFINE,
})

# Which product flag switches a hard_or_none dimension on
_HARD_OR_NONE_FLAGS: dict[str, str] = {
    "vatRegistered": "vat_required",
    "saDirector": "sa_director_required",
}

# Amount may sit this far outside the product range and still be an improvement
AMOUNT_TOLERANCE_PCT = Decimal("20")

# Score penalties for qualified products
OUTER_RANGE_BAND = 0.1
OUTER_RANGE_PENALTY = 0.1
URGENCY_PENALTY = 0.1
THIN_TURNOVER_RATIO = Decimal("1.5")
THIN_TURNOVER_PENALTY = 0.05

# Qualified scores closer than this are tied and fall back to speed
SCORE_TIE_EPSILON = 0.01

# Fields that must all be known before any per-product check runs
MINIMUM_BASICS: tuple[str, ...] = ("monthly_turnover", "years_trading", "amount_requested")


def policy_for(dimension: str, product: LenderProduct | None = None) -> RequirementPolicy:
    """Resolve the policy of a dimension, optionally for a specific product.

    ``hard_or_none`` resolves to ``hard`` when the product sets the matching
    flag to True and to ``none`` otherwise. Without a product the raw table
    value is returned.

    Raises:
        KeyError: If the dimension is not in the policy table.
    """
    policy = REQUIREMENT_POLICY[dimension]
    if policy is not RequirementPolicy.HARD_OR_NONE or product is None:
        return policy
    flag = getattr(product, _HARD_OR_NONE_FLAGS[dimension])
    return RequirementPolicy.HARD if flag is True else RequirementPolicy.NONE
