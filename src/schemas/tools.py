"""Result schemas for the tool handlers.

These are what the response-generation step receives after a tool call.
Serialized with camelCase keys (``model_dump(by_alias=True)``).
"""

from __future__ import annotations

from pydantic import Field

from src.models.enums import MatchStatus, ProductType
from src.schemas.eligibility import BusinessProfile, Rand, WireModel

# ---------------------------------------------------------------------------
# search_lenders
# ---------------------------------------------------------------------------


class LenderSummary(WireModel):
    """A qualified lender, flattened for narration."""

    id: str
    provider: str
    product_type: ProductType
    amount_range: str          # e.g. "R20,000 - R2,000,000"
    speed: str                 # e.g. "2-3 days"
    min_years: float
    min_turnover: Rand
    vat_required: bool
    collateral_required: bool | None = None


class CloseMatchSummary(WireModel):
    """A needs-more-info lender with what stands in the way."""

    id: str
    provider: str
    reasons: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class RejectedSummary(WireModel):
    id: str
    provider: str
    reasons: list[str] = Field(default_factory=list)


class SearchSummary(WireModel):
    qualified_count: int
    need_more_info_count: int
    not_qualified_count: int
    profile_completeness: int  # number of known profile fields


class LenderSearchResult(WireModel):
    success: bool = True
    qualified: list[LenderSummary] = Field(default_factory=list)
    need_more_info: list[CloseMatchSummary] = Field(default_factory=list)
    not_qualified: list[RejectedSummary] = Field(default_factory=list)
    summary: SearchSummary
    levers: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# get_lender_requirements
# ---------------------------------------------------------------------------


class AmountRange(WireModel):
    min: Rand
    max: Rand
    formatted: str


class SpeedRange(WireModel):
    min: int
    max: int
    formatted: str


class LenderCriteria(WireModel):
    min_years: float
    min_monthly_turnover: Rand
    vat_required: bool
    collateral_required: bool | None = None
    sa_director_required: bool | None = None
    provinces_allowed: list[str] | None = None
    sector_exclusions: list[str] | None = None


class LenderRequirements(WireModel):
    name: str
    product_type: ProductType
    amount_range: AmountRange
    requirements: LenderCriteria
    speed: SpeedRange
    interest_rate: str = ""
    notes: str | None = None
    repayment: dict[str, str] = Field(default_factory=dict)


class LenderRequirementsResult(WireModel):
    success: bool
    lender: LenderRequirements | None = None
    error: str | None = None
    available_lenders: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# calculate_eligibility
# ---------------------------------------------------------------------------


class EligibilityCheckResult(WireModel):
    success: bool
    lender_name: str | None = None
    status: MatchStatus | None = None
    message: str | None = None
    reasons: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    match_percentage: int | None = None
    error: str | None = None


# ---------------------------------------------------------------------------
# validate_province / update_business_profile
# ---------------------------------------------------------------------------


class ProvinceValidation(WireModel):
    valid: bool
    original_input: str | None = None
    standard_name: str | None = None
    message: str
    suggestions: list[str] = Field(default_factory=list)


class ProfileUpdateResult(WireModel):
    success: bool
    profile: BusinessProfile
    updated: list[str] = Field(default_factory=list)   # camelCase field names
    message: str
