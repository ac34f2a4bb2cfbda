"""Question groups and their wording, in the order they are asked.

The conversational prompt builder (external) weaves these into the reply;
the flow controller only decides which one is due.
"""

from __future__ import annotations

from src.models.enums import QuestionGroup

# Core four, asked together when most are missing
CORE_QUESTIONS: dict[str, str] = {
    "industry": "What industry are you in?",
    "years_trading": "How long have you been trading?",
    "monthly_turnover": "What's your monthly turnover?",
    "amount_requested": "How much funding do you need?",
}

ONBOARDING_HEADER = "Tell me about your business:"
FOLLOW_UP_HEADER = "Just need a bit more info:"

# With this many core fields missing we show the onboarding prompt
ONBOARDING_THRESHOLD = 3

# Group → profile fields it covers. Insertion order is asking order.
QUESTION_GROUP_FIELDS: dict[QuestionGroup, tuple[str, ...]] = {
    QuestionGroup.CORE: tuple(CORE_QUESTIONS),
    QuestionGroup.JURISDICTION: ("sa_registered", "sa_director"),
    QuestionGroup.BANK_STATEMENTS: ("bank_statements",),
    QuestionGroup.LOCATION_TAX: ("province", "vat_registered"),
    QuestionGroup.COLLATERAL: ("collateral_acceptable",),
}

# Fixed wording for every group except CORE, which is built from what's missing
GROUP_PROMPTS: dict[QuestionGroup, str] = {
    QuestionGroup.JURISDICTION: (
        "Is your business registered in South Africa, and do you have at least one SA director?"
    ),
    QuestionGroup.BANK_STATEMENTS: "Do you have 6+ months of bank statements available?",
    QuestionGroup.LOCATION_TAX: "Which province are you based in, and are you VAT registered?",
    QuestionGroup.COLLATERAL: "Are you open to offering collateral if needed?",
}

# Everything needed before lever guidance starts. Collateral is a
# refinement and never gates this.
HARD_REQUIREMENT_FIELDS: tuple[str, ...] = (
    "industry",
    "monthly_turnover",
    "years_trading",
    "amount_requested",
    "sa_registered",
    "sa_director",
    "bank_statements",
    "province",
    "vat_registered",
)
