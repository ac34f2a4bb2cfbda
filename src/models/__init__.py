"""Shared enumerations for profiles, lender products and match results."""

from __future__ import annotations

from src.models.enums import (
    FindingKind,
    MatchStatus,
    ProductType,
    Province,
    QuestionGroup,
    RequirementPolicy,
)

__all__ = [
    "FindingKind",
    "MatchStatus",
    "ProductType",
    "Province",
    "QuestionGroup",
    "RequirementPolicy",
]
