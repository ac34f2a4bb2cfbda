"""Per-dimension eligibility rule functions.

Each rule takes a BusinessProfile and a LenderProduct and returns a
RuleFinding, or None when the dimension raises nothing for that product.
Rules only run once the minimum basics are known, so years trading,
turnover and the requested amount are never None here.

Optional booleans are always tested with ``is True`` / ``is False`` /
``is None``: a missing answer is a MISSING finding, never a REASON.
"""

from __future__ import annotations

from collections.abc import Callable

from src.decoders.province import province_key
from src.eligibility.requirements import AMOUNT_TOLERANCE_PCT, policy_for
from src.formatters import format_rand, format_years
from src.models.enums import FindingKind, RequirementPolicy
from src.schemas.eligibility import BusinessProfile, LenderProduct, RuleFinding

RuleCheck = Callable[[BusinessProfile, LenderProduct], RuleFinding | None]


def _reason(dimension: str, message: str) -> RuleFinding:
    return RuleFinding(dimension=dimension, kind=FindingKind.REASON, message=message)


def _improvement(dimension: str, message: str) -> RuleFinding:
    return RuleFinding(dimension=dimension, kind=FindingKind.IMPROVEMENT, message=message)


def _missing(dimension: str, message: str) -> RuleFinding:
    return RuleFinding(dimension=dimension, kind=FindingKind.MISSING, message=message)


# ── Hard rules ────────────────────────────────────────────────────────────


def check_sa_registered(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """Business must be registered in South Africa."""
    if profile.sa_registered is False:
        return _reason("saRegistered", "Business must be registered in South Africa")
    if profile.sa_registered is None:
        return _missing("saRegistered", "Confirm your business is registered in South Africa")
    return None


def check_sa_director(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """At least one SA director, only for lenders that ask for it."""
    if policy_for("saDirector", product) is not RequirementPolicy.HARD:
        return None
    if profile.sa_director is False:
        return _reason("saDirector", f"{product.provider} requires at least one South African director")
    if profile.sa_director is None:
        return _missing("saDirector", "Confirm you have at least one South African director")
    return None


def check_bank_statements(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """Six months of bank statements."""
    if profile.bank_statements is False:
        return _reason("bankStatements", "6+ months of bank statements required")
    if profile.bank_statements is None:
        return _missing("bankStatements", "Confirm you have 6+ months of bank statements")
    return None


def check_years_trading(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    if profile.years_trading < product.min_years:
        return _reason(
            "yearsTrading",
            f"Min {format_years(product.min_years)} trading required, "
            f"you have {format_years(profile.years_trading)}",
        )
    return None


def check_monthly_turnover(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    # Turnover is a fact about the business, never offered as a lever
    if profile.monthly_turnover < product.min_monthly_turnover:
        return _reason(
            "monthlyTurnover",
            f"Min turnover {format_rand(product.min_monthly_turnover)}/mo, "
            f"you have {format_rand(profile.monthly_turnover)}/mo",
        )
    return None


def check_sector(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """Sector deny-list, compared case-insensitively."""
    if not product.sector_exclusions:
        return None
    if profile.industry is None:
        return _missing("industry", f"Tell us your industry ({product.provider} excludes some sectors)")
    excluded = {sector.casefold() for sector in product.sector_exclusions}
    if profile.industry.strip().casefold() in excluded:
        return _reason("industry", f"{profile.industry} sector excluded")
    return None


def check_province(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """Province allow-list. Unknown province strings simply don't match."""
    if product.provinces_allowed is None:
        return None
    if profile.province is None:
        return _missing("province", "Confirm which province your business is based in")
    allowed = {province_key(p) for p in product.provinces_allowed}
    if province_key(profile.province) not in allowed:
        return _reason("province", f"Not available in {profile.province}")
    return None


def check_collateral_refused(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    if product.collateral_required is True and profile.collateral_acceptable is False:
        return _reason("collateralAcceptable", "Collateral required")
    return None


# ── Flex rules ────────────────────────────────────────────────────────────


def check_amount(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """Requested amount against the inclusive product range.

    A gap of up to AMOUNT_TOLERANCE_PCT of the breached bound becomes a
    suggestion to adjust; anything wider is a hard reason.
    """
    amount = profile.amount_requested

    if amount < product.amount_min:
        shortfall_pct = (product.amount_min - amount) / product.amount_min * 100
        if shortfall_pct <= AMOUNT_TOLERANCE_PCT:
            return _improvement(
                "amountRequested",
                f"Consider requesting at least {format_rand(product.amount_min)}",
            )
        return _reason(
            "amountRequested",
            f"Min amount {format_rand(product.amount_min)}, you requested {format_rand(amount)}",
        )

    if amount > product.amount_max:
        excess_pct = (amount - product.amount_max) / product.amount_max * 100
        if excess_pct <= AMOUNT_TOLERANCE_PCT:
            return _improvement(
                "amountRequested",
                f"Consider reducing to max {format_rand(product.amount_max)}",
            )
        return _reason(
            "amountRequested",
            f"Max amount {format_rand(product.amount_max)}, you requested {format_rand(amount)}",
        )

    return None


def check_vat(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    """VAT registration, only for lenders that require it. Registering is fixable."""
    if policy_for("vatRegistered", product) is not RequirementPolicy.HARD:
        return None
    if profile.vat_registered is False:
        return _improvement("vatRegistered", "Need VAT registration")
    if profile.vat_registered is None:
        return _missing("vatRegistered", "Confirm whether your business is VAT registered")
    return None


def check_collateral_unconfirmed(profile: BusinessProfile, product: LenderProduct) -> RuleFinding | None:
    if product.collateral_required is True and profile.collateral_acceptable is None:
        return _improvement(
            "collateralAcceptable",
            "Collateral required: confirm you're open to offering security",
        )
    return None


# ── Rule registry ─────────────────────────────────────────────────────────

# Evaluated in order; every finding is kept, not just the first.
HARD_RULES: tuple[RuleCheck, ...] = (
    check_sa_registered,
    check_sa_director,
    check_bank_statements,
    check_years_trading,
    check_monthly_turnover,
    check_sector,
    check_province,
    check_collateral_refused,
)

# (dimension, rule). A flex rule is skipped when a hard rule already
# produced a reason on the same dimension.
FLEX_RULES: tuple[tuple[str, RuleCheck], ...] = (
    ("amountRequested", check_amount),
    ("vatRegistered", check_vat),
    ("collateralAcceptable", check_collateral_unconfirmed),
)
