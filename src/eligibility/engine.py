"""Eligibility engine: evaluates lender products against a business profile.

Pure Python orchestrator. No I/O, no LLM calls, no stored state.
Callers re-run the full match on every profile change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any

from src.eligibility.catalog import InvalidProductError, iter_valid_products
from src.eligibility.requirements import (
    MINIMUM_BASICS,
    OUTER_RANGE_BAND,
    OUTER_RANGE_PENALTY,
    SCORE_TIE_EPSILON,
    THIN_TURNOVER_PENALTY,
    THIN_TURNOVER_RATIO,
    URGENCY_PENALTY,
)
from src.eligibility.rules import FLEX_RULES, HARD_RULES
from src.models.enums import FindingKind, MatchStatus
from src.schemas.eligibility import (
    BusinessProfile,
    LenderProduct,
    MatchBuckets,
    MatchResult,
    NeedMoreInfoMatch,
    NotQualifiedMatch,
    QualifiedMatch,
    RuleFinding,
    product_structure_errors,
)

logger = logging.getLogger(__name__)

_BASICS_LABELS: dict[str, str] = {
    "monthly_turnover": "monthly turnover",
    "years_trading": "years trading",
    "amount_requested": "amount requested",
}


@dataclass
class _Findings:
    """Findings for one product, split by the list they land in."""

    reasons: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)

    def add(self, finding: RuleFinding) -> None:
        if finding.kind is FindingKind.REASON:
            self.reasons.append(finding.message)
        elif finding.kind is FindingKind.MISSING:
            self.missing.append(finding.message)
        else:
            self.improvements.append(finding.message)


# Classification rules, first match wins. Anything left over is not qualified.
# A single hard blocker next to fixable gaps still counts as close.
_CLASSIFICATION_RULES: tuple[tuple[str, Callable[[_Findings], bool], MatchStatus], ...] = (
    ("missing_requirements", lambda f: bool(f.missing), MatchStatus.NEED_MORE_INFO),
    ("clean", lambda f: not f.reasons and not f.improvements, MatchStatus.QUALIFIED),
    ("fixable_only", lambda f: not f.reasons and bool(f.improvements), MatchStatus.NEED_MORE_INFO),
    ("one_blocker_with_fixes", lambda f: bool(f.improvements) and len(f.reasons) <= 1, MatchStatus.NEED_MORE_INFO),
)


def has_minimum_basics(profile: BusinessProfile) -> bool:
    """Turnover, years trading and the requested amount are all known."""
    return all(getattr(profile, name) is not None for name in MINIMUM_BASICS)


def _basics_notice(profile: BusinessProfile) -> str:
    missing = [_BASICS_LABELS[name] for name in MINIMUM_BASICS if getattr(profile, name) is None]
    return f"Core business information needed: {', '.join(missing)}"


def _ensure_valid(product: LenderProduct) -> None:
    """Re-check structure; products built with model_construct skip validation."""
    try:
        errors = product_structure_errors(product)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidProductError(str(getattr(product, "id", "?")), [str(exc)]) from exc
    if errors:
        raise InvalidProductError(product.id, errors)


def _collect_findings(profile: BusinessProfile, product: LenderProduct) -> _Findings:
    findings = _Findings()
    blocked_dimensions: set[str] = set()

    for rule in HARD_RULES:
        finding = rule(profile, product)
        if finding is None:
            continue
        findings.add(finding)
        if finding.kind is FindingKind.REASON:
            blocked_dimensions.add(finding.dimension)

    for dimension, rule in FLEX_RULES:
        if dimension in blocked_dimensions:
            continue
        finding = rule(profile, product)
        if finding is not None:
            findings.add(finding)

    return findings


def _amount_position(profile: BusinessProfile, product: LenderProduct) -> float | None:
    """Where the requested amount sits in the product range (0 = min, 1 = max)."""
    span = product.amount_max - product.amount_min
    if profile.amount_requested is None or span <= 0:
        return None
    return float((profile.amount_requested - product.amount_min) / span)


def _score(profile: BusinessProfile, product: LenderProduct) -> float:
    """Ranking score for a qualified product. Internal only."""
    score = 1.0

    position = _amount_position(profile, product)
    if position is not None and (position < OUTER_RANGE_BAND or position > 1 - OUTER_RANGE_BAND):
        score -= OUTER_RANGE_PENALTY

    if profile.urgency_days is not None and profile.urgency_days < product.speed_days[0]:
        score -= URGENCY_PENALTY

    if product.min_monthly_turnover > 0:
        ratio = profile.monthly_turnover / product.min_monthly_turnover
        if ratio < THIN_TURNOVER_RATIO:
            score -= THIN_TURNOVER_PENALTY

    return round(score, 4)


def _classify(findings: _Findings) -> MatchStatus:
    for _name, applies, status in _CLASSIFICATION_RULES:
        if applies(findings):
            return status
    return MatchStatus.NOT_QUALIFIED


def evaluate(profile: BusinessProfile, product: LenderProduct) -> MatchResult:
    """Classify one product for a (possibly partial) profile.

    Pure and deterministic: neither argument is modified.

    Returns:
        QualifiedMatch, NeedMoreInfoMatch or NotQualifiedMatch.

    Raises:
        InvalidProductError: If the product definition is structurally broken,
            including values of the wrong type that only surface while the
            rules run (products built with model_construct).
    """
    _ensure_valid(product)
    try:
        return _evaluate_valid(profile, product)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidProductError(str(getattr(product, "id", "?")), [str(exc)]) from exc


def _evaluate_valid(profile: BusinessProfile, product: LenderProduct) -> MatchResult:
    if not has_minimum_basics(profile):
        notice = _basics_notice(profile)
        return NeedMoreInfoMatch(product=product, improvements=[notice], missing_info=[notice])

    findings = _collect_findings(profile, product)
    status = _classify(findings)

    if status is MatchStatus.QUALIFIED:
        return QualifiedMatch(product=product, score=_score(profile, product))
    if status is MatchStatus.NEED_MORE_INFO:
        return NeedMoreInfoMatch(
            product=product,
            reasons=list(findings.reasons),
            improvements=findings.missing + findings.improvements,
            missing_info=list(findings.missing),
        )
    return NotQualifiedMatch(product=product, reasons=list(findings.reasons))


def _compare_qualified(a: QualifiedMatch, b: QualifiedMatch) -> int:
    """Higher score first; near-equal scores go to the faster lender."""
    if abs(a.score - b.score) > SCORE_TIE_EPSILON:
        return -1 if a.score > b.score else 1
    return a.product.speed_days[0] - b.product.speed_days[0]


def rank_qualified(matches: list[QualifiedMatch]) -> list[QualifiedMatch]:
    """Return qualified matches in presentation order."""
    return sorted(matches, key=cmp_to_key(_compare_qualified))


def match_all(
    profile: BusinessProfile,
    products: Iterable[LenderProduct | Mapping[str, Any]] | None,
) -> MatchBuckets:
    """Evaluate every product and bucket the results.

    Tolerates an empty, missing or partly malformed catalog: bad records are
    logged and excluded, the rest are still matched.
    """
    qualified: list[QualifiedMatch] = []
    need_more_info: list[NeedMoreInfoMatch] = []
    not_qualified: list[NotQualifiedMatch] = []

    for product in iter_valid_products(products):
        try:
            result = evaluate(profile, product)
        except InvalidProductError as exc:
            logger.warning("Excluding product from match: %s", exc)
            continue

        if isinstance(result, QualifiedMatch):
            qualified.append(result)
        elif isinstance(result, NeedMoreInfoMatch):
            need_more_info.append(result)
        else:
            not_qualified.append(result)

    buckets = MatchBuckets(
        qualified=[m.product for m in rank_qualified(qualified)],
        need_more_info=need_more_info,
        not_qualified=not_qualified,
    )
    logger.info(
        "Match complete: qualified=%d need_more_info=%d not_qualified=%d (known fields=%d)",
        len(buckets.qualified),
        len(buckets.need_more_info),
        len(buckets.not_qualified),
        len(profile.known_fields()),
    )
    return buckets
