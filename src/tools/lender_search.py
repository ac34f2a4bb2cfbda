"""Lender search tools: catalog-wide search, lender details, single-lender check.

Stateless wrappers around the eligibility engine. The caller supplies the
current profile and catalog; results are flattened for narration.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.config import settings
from src.eligibility.engine import match_all
from src.eligibility.levers import compute_levers
from src.eligibility.products import PRODUCT_TYPE_EXPLAINERS
from src.formatters import format_rand_full, format_rate, format_speed
from src.models.enums import MatchStatus
from src.schemas.eligibility import BusinessProfile, LenderProduct
from src.schemas.tools import (
    AmountRange,
    CloseMatchSummary,
    EligibilityCheckResult,
    LenderCriteria,
    LenderRequirements,
    LenderRequirementsResult,
    LenderSearchResult,
    LenderSummary,
    RejectedSummary,
    SearchSummary,
    SpeedRange,
)

logger = logging.getLogger(__name__)

# Rough confidence shown next to a single-lender check
MATCH_PERCENTAGE: dict[MatchStatus, int] = {
    MatchStatus.QUALIFIED: 100,
    MatchStatus.NEED_MORE_INFO: 70,
    MatchStatus.NOT_QUALIFIED: 30,
}


def _amount_range(product: LenderProduct) -> str:
    return f"{format_rand_full(product.amount_min)} - {format_rand_full(product.amount_max)}"


def _summarize(product: LenderProduct) -> LenderSummary:
    return LenderSummary(
        id=product.id,
        provider=product.provider,
        product_type=product.product_type,
        amount_range=_amount_range(product),
        speed=format_speed(product.speed_days),
        min_years=product.min_years,
        min_turnover=product.min_monthly_turnover,
        vat_required=product.vat_required,
        collateral_required=product.collateral_required,
    )


def search_lenders(
    profile: BusinessProfile,
    catalog: Sequence[LenderProduct],
    target: int | None = None,
) -> LenderSearchResult:
    """Match the profile against the whole catalog.

    Levers are offered while fewer than ``target`` lenders qualify; without a
    target the configured ``LEVER_TARGET_MATCHES`` applies.
    """
    if target is None:
        target = settings.matching.lever_target_matches
    buckets = match_all(profile, catalog)

    return LenderSearchResult(
        qualified=[_summarize(p) for p in buckets.qualified],
        need_more_info=[
            CloseMatchSummary(
                id=m.product.id,
                provider=m.product.provider,
                reasons=m.reasons,
                improvements=m.improvements,
            )
            for m in buckets.need_more_info
        ],
        not_qualified=[
            RejectedSummary(id=m.product.id, provider=m.product.provider, reasons=m.reasons)
            for m in buckets.not_qualified
        ],
        summary=SearchSummary(
            qualified_count=len(buckets.qualified),
            need_more_info_count=len(buckets.need_more_info),
            not_qualified_count=len(buckets.not_qualified),
            profile_completeness=len(profile.known_fields()),
        ),
        levers=compute_levers(profile, buckets, target=target),
    )


def _find_by_provider(name: str, catalog: Sequence[LenderProduct]) -> LenderProduct | None:
    wanted = name.strip().casefold()
    for product in catalog:
        if product.provider.casefold() == wanted:
            return product
    return None


def get_lender_requirements(lender_name: str, catalog: Sequence[LenderProduct]) -> LenderRequirementsResult:
    """Full criteria for one lender, looked up by provider name (case-insensitive)."""
    product = _find_by_provider(lender_name, catalog)
    if product is None:
        return LenderRequirementsResult(
            success=False,
            error=f"Lender '{lender_name}' not found",
            available_lenders=[p.provider for p in catalog],
        )

    explainer = PRODUCT_TYPE_EXPLAINERS.get(product.product_type, {})
    repayment = dict(explainer)
    if product.repayment_style:
        repayment["repayment_style"] = product.repayment_style
    if product.repayment_description:
        repayment["default_repayment_description"] = product.repayment_description

    return LenderRequirementsResult(
        success=True,
        lender=LenderRequirements(
            name=product.provider,
            product_type=product.product_type,
            amount_range=AmountRange(
                min=product.amount_min,
                max=product.amount_max,
                formatted=_amount_range(product),
            ),
            requirements=LenderCriteria(
                min_years=product.min_years,
                min_monthly_turnover=product.min_monthly_turnover,
                vat_required=product.vat_required,
                collateral_required=product.collateral_required,
                sa_director_required=product.sa_director_required,
                provinces_allowed=list(product.provinces_allowed) if product.provinces_allowed else None,
                sector_exclusions=list(product.sector_exclusions) if product.sector_exclusions else None,
            ),
            speed=SpeedRange(
                min=product.speed_days[0],
                max=product.speed_days[1],
                formatted=format_speed(product.speed_days),
            ),
            interest_rate=format_rate(product.interest_rate),
            notes=product.notes,
            repayment=repayment,
        ),
    )


def calculate_eligibility(
    lender_id: str,
    profile: BusinessProfile,
    catalog: Sequence[LenderProduct],
) -> EligibilityCheckResult:
    """Check the profile against a single lender, by product id."""
    product = next((p for p in catalog if p.id == lender_id), None)
    if product is None:
        return EligibilityCheckResult(success=False, error=f"Lender with ID '{lender_id}' not found")

    buckets = match_all(profile, [product])

    if buckets.qualified:
        status = MatchStatus.QUALIFIED
        message = "Fully qualified for this lender"
        reasons: list[str] = []
        improvements: list[str] = []
    elif buckets.need_more_info:
        status = MatchStatus.NEED_MORE_INFO
        message = "Close match - need more information"
        reasons = buckets.need_more_info[0].reasons
        improvements = buckets.need_more_info[0].improvements
    elif buckets.not_qualified:
        status = MatchStatus.NOT_QUALIFIED
        message = "Not qualified"
        reasons = buckets.not_qualified[0].reasons
        improvements = []
    else:
        logger.warning("Lender %s could not be evaluated", lender_id)
        return EligibilityCheckResult(success=False, error=f"Lender '{lender_id}' could not be evaluated")

    return EligibilityCheckResult(
        success=True,
        lender_name=product.provider,
        status=status,
        message=message,
        reasons=reasons,
        improvements=improvements,
        match_percentage=MATCH_PERCENTAGE[status],
    )
