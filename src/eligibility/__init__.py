"""Eligibility engine: rule-based lender matching for SME funding applicants."""

from src.eligibility.catalog import CatalogError, InvalidProductError, load_catalog, parse_catalog
from src.eligibility.engine import evaluate, has_minimum_basics, match_all
from src.eligibility.levers import compute_levers
from src.eligibility.products import PRODUCTS
from src.eligibility.requirements import REQUIREMENT_POLICY, policy_for
from src.schemas.eligibility import (
    BusinessProfile,
    LenderProduct,
    MatchBuckets,
    NeedMoreInfoMatch,
    NotQualifiedMatch,
    QualifiedMatch,
)

__all__ = [
    "evaluate",
    "match_all",
    "has_minimum_basics",
    "compute_levers",
    "load_catalog",
    "parse_catalog",
    "PRODUCTS",
    "REQUIREMENT_POLICY",
    "policy_for",
    "CatalogError",
    "InvalidProductError",
    "BusinessProfile",
    "LenderProduct",
    "MatchBuckets",
    "QualifiedMatch",
    "NeedMoreInfoMatch",
    "NotQualifiedMatch",
]
