"""Domain enums used across pydantic schemas, rules and the flow controller.

All enums use str mixin so they serialize as plain JSON strings.
"""

from __future__ import annotations

from enum import Enum


class ProductType(str, Enum):
    """Lender product families in the catalog."""

    WORKING_CAPITAL = "Working Capital"
    INVOICE_DISCOUNTING = "Invoice Discounting"
    MERCHANT_CASH_ADVANCE = "Merchant Cash Advance"
    ASSET_FINANCE = "Asset Finance"
    TERM_LOAN = "Term Loan"
    REVENUE_BASED_FINANCE = "Revenue-Based Finance"


class MatchStatus(str, Enum):
    """Outcome of evaluating one product against a profile."""

    QUALIFIED = "qualified"
    NEED_MORE_INFO = "need_more_info"
    NOT_QUALIFIED = "not_qualified"


class RequirementPolicy(str, Enum):
    """How a profile dimension is treated by the evaluator."""

    HARD = "hard"                  # immutable fact, violation disqualifies
    FLEX = "flex"                  # negotiable within a tolerance band
    HARD_OR_NONE = "hard_or_none"  # hard only when the product asks for it
    REFINE = "refine"              # ranking only
    NONE = "none"                  # resolved hard_or_none for a product that doesn't care


class FindingKind(str, Enum):
    """Which list a rule finding lands in."""

    REASON = "reason"              # hard blocker
    IMPROVEMENT = "improvement"    # fixable gap
    MISSING = "missing"            # unknown value the product needs


class Province(str, Enum):
    """The nine South African provinces (standard names)."""

    GAUTENG = "Gauteng"
    WESTERN_CAPE = "Western Cape"
    KWAZULU_NATAL = "KwaZulu-Natal"
    EASTERN_CAPE = "Eastern Cape"
    FREE_STATE = "Free State"
    LIMPOPO = "Limpopo"
    MPUMALANGA = "Mpumalanga"
    NORTH_WEST = "North West"
    NORTHERN_CAPE = "Northern Cape"


class QuestionGroup(str, Enum):
    """Ordered question groups asked by the flow controller."""

    CORE = "core"
    JURISDICTION = "jurisdiction"
    BANK_STATEMENTS = "bank_statements"
    LOCATION_TAX = "location_tax"
    COLLATERAL = "collateral"
