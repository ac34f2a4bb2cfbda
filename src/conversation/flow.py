"""Profile flow controller: which question group to ask next.

Works on presence/absence of profile fields only, independent of any
product. The first group with a missing field wins.
"""

from __future__ import annotations

import logging

from src.conversation.questions import (
    CORE_QUESTIONS,
    FOLLOW_UP_HEADER,
    GROUP_PROMPTS,
    HARD_REQUIREMENT_FIELDS,
    ONBOARDING_HEADER,
    ONBOARDING_THRESHOLD,
    QUESTION_GROUP_FIELDS,
)
from src.models.enums import QuestionGroup
from src.schemas.eligibility import BusinessProfile

logger = logging.getLogger(__name__)


def _missing(profile: BusinessProfile, fields: tuple[str, ...]) -> list[str]:
    return [name for name in fields if getattr(profile, name) is None]


def has_hard_requirements(profile: BusinessProfile) -> bool:
    """All hard facts are known, so questioning can give way to lever guidance."""
    return not _missing(profile, HARD_REQUIREMENT_FIELDS)


def next_question_group_id(profile: BusinessProfile) -> QuestionGroup | None:
    """Return the first group with a missing field, or None when all are answered."""
    for group, fields in QUESTION_GROUP_FIELDS.items():
        if _missing(profile, fields):
            return group
    return None


def _core_prompt(missing: list[str]) -> str:
    header = ONBOARDING_HEADER if len(missing) >= ONBOARDING_THRESHOLD else FOLLOW_UP_HEADER
    bullets = "\n".join(f"• {CORE_QUESTIONS[name]}" for name in missing)
    return f"{header}\n{bullets}"


def next_question_group(profile: BusinessProfile) -> str | None:
    """Return the wording of the next question group, or None when nothing is left to ask."""
    group = next_question_group_id(profile)
    if group is None:
        return None

    logger.debug("Next question group: %s", group.value)
    if group is QuestionGroup.CORE:
        return _core_prompt(_missing(profile, QUESTION_GROUP_FIELDS[QuestionGroup.CORE]))
    return GROUP_PROMPTS[group]
