"""Pydantic schemas for the eligibility engine.

Pure data classes, no I/O. Python code uses snake_case attributes; the
JSON shape exchanged with the extraction step and the presentation layer
uses camelCase aliases (``yearsTrading``, ``amountMin``, ``needMoreInfo``).

Every profile field is optional and ``None`` means "not provided yet".
Nothing in this package treats ``None`` as ``False`` or ``0``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

from src.models.enums import FindingKind, MatchStatus, ProductType


def _rand_to_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Rand amount. Decimal in Python, a plain JSON number on the wire.
Rand = Annotated[Decimal, PlainSerializer(_rand_to_number, return_type=int | float, when_used="json")]


class WireModel(BaseModel):
    """Base model with camelCase aliases, accepting either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Applicant profile
# ---------------------------------------------------------------------------


class ContactDetails(WireModel):
    """Applicant contact details. Carried through, never matched on."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None


class BusinessProfile(WireModel):
    """What we know about the applicant so far.

    Built up incrementally from extracted chat fields.
    """

    industry: str | None = None
    years_trading: float | None = Field(default=None, ge=0)
    monthly_turnover: Rand | None = Field(default=None, ge=0)
    vat_registered: bool | None = None
    amount_requested: Rand | None = Field(default=None, gt=0)
    use_of_funds: str | None = None
    urgency_days: int | None = Field(default=None, gt=0)
    province: str | None = None
    collateral_acceptable: bool | None = None

    # Jurisdiction / compliance
    sa_registered: bool | None = None
    sa_director: bool | None = None
    bank_statements: bool | None = None

    contact: ContactDetails | None = None

    def known_fields(self) -> list[str]:
        """Names of the fields that have a value (``False`` counts as known)."""
        return [name for name in type(self).model_fields if getattr(self, name) is not None]


# ---------------------------------------------------------------------------
# Lender product
# ---------------------------------------------------------------------------


def product_structure_errors(product: LenderProduct) -> list[str]:
    """Range checks a product must pass before it can be evaluated."""
    errors: list[str] = []
    if product.amount_min <= 0:
        errors.append(f"amountMin must be positive, got {product.amount_min}")
    if product.amount_min > product.amount_max:
        errors.append(f"amountMin {product.amount_min} exceeds amountMax {product.amount_max}")
    if product.min_years < 0:
        errors.append(f"minYears must not be negative, got {product.min_years}")
    if product.min_monthly_turnover < 0:
        errors.append(f"minMonthlyTurnover must not be negative, got {product.min_monthly_turnover}")
    fastest, slowest = product.speed_days
    if fastest < 0 or fastest > slowest:
        errors.append(f"speedDays must be an ordered non-negative pair, got {list(product.speed_days)}")
    return errors


class LenderProduct(WireModel):
    """One lender offer from the catalog. Immutable."""

    model_config = ConfigDict(frozen=True)

    id: str
    provider: str
    logo: str | None = None
    product_type: ProductType
    amount_min: Rand
    amount_max: Rand
    min_years: float
    min_monthly_turnover: Rand
    vat_required: bool = False
    provinces_allowed: tuple[str, ...] | None = None   # None = all provinces
    sector_exclusions: tuple[str, ...] | None = None
    speed_days: tuple[int, int]                         # funding turnaround (min, max)
    collateral_required: bool | None = None
    sa_director_required: bool | None = None
    interest_rate: tuple[float, float] | None = None    # percent (min, max)
    notes: str | None = None
    repayment_style: str | None = None
    repayment_description: str | None = None

    @model_validator(mode="after")
    def _check_structure(self) -> LenderProduct:
        errors = product_structure_errors(self)
        if errors:
            msg = f"Invalid product {self.id!r}: " + "; ".join(errors)
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Evaluation output
# ---------------------------------------------------------------------------


class RuleFinding(BaseModel):
    """A single observation made by a rule while evaluating one product."""

    model_config = ConfigDict(frozen=True)

    dimension: str                   # profile dimension, e.g. "yearsTrading"
    kind: FindingKind
    message: str


class _MatchBase(WireModel):
    product: LenderProduct
    reasons: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class QualifiedMatch(_MatchBase):
    """All requirements met. ``score`` is internal and only used for ranking."""

    status: Literal[MatchStatus.QUALIFIED] = MatchStatus.QUALIFIED
    score: float = Field(default=1.0, exclude=True)


class NeedMoreInfoMatch(_MatchBase):
    """Not disqualified yet: unknowns to resolve or small gaps to close.

    ``improvements`` lists the missing-information notices first, then the
    fixable gaps; ``missing_info`` repeats just the notices so callers can
    tell "not answered yet" apart from "answered, but short".
    """

    status: Literal[MatchStatus.NEED_MORE_INFO] = MatchStatus.NEED_MORE_INFO
    missing_info: list[str] = Field(default_factory=list)


class NotQualifiedMatch(_MatchBase):
    """Hard blockers with no recovery path. ``improvements`` is always empty."""

    status: Literal[MatchStatus.NOT_QUALIFIED] = MatchStatus.NOT_QUALIFIED


MatchResult = Annotated[
    QualifiedMatch | NeedMoreInfoMatch | NotQualifiedMatch,
    Field(discriminator="status"),
]


class MatchBuckets(WireModel):
    """Catalog-wide match output, consumed by presentation and response generation."""

    qualified: list[LenderProduct] = Field(default_factory=list)   # ranked best first
    need_more_info: list[NeedMoreInfoMatch] = Field(default_factory=list)
    not_qualified: list[NotQualifiedMatch] = Field(default_factory=list)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "qualified": len(self.qualified),
            "needMoreInfo": len(self.need_more_info),
            "notQualified": len(self.not_qualified),
        }
