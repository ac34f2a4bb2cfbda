"""Tool handlers exposed to the conversational model.

Tool calls arrive as (name, args); the caller supplies the current profile
and catalog, since nothing here stores state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from src.schemas.eligibility import BusinessProfile, LenderProduct
from src.tools.business_profile import apply_profile_update, update_business_profile
from src.tools.lender_search import calculate_eligibility, get_lender_requirements, search_lenders
from src.tools.validation import validate_province

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Mapping[str, Any], BusinessProfile, Sequence[LenderProduct]], BaseModel]

TOOL_HANDLERS: dict[str, ToolHandler] = {
    "get_business_profile": lambda args, profile, catalog: profile,
    "update_business_profile": lambda args, profile, catalog: update_business_profile(profile, args),
    "search_lenders": lambda args, profile, catalog: search_lenders(profile, catalog),
    "get_lender_requirements": lambda args, profile, catalog: get_lender_requirements(
        str(args.get("lenderName", "")), catalog,
    ),
    "calculate_eligibility": lambda args, profile, catalog: calculate_eligibility(
        str(args.get("lenderId", "")), profile, catalog,
    ),
    "validate_province": lambda args, profile, catalog: validate_province(args.get("province")),
}


def dispatch_tool(
    name: str,
    args: Mapping[str, Any] | None,
    profile: BusinessProfile,
    catalog: Sequence[LenderProduct],
) -> BaseModel:
    """Route a tool call to its handler.

    Raises:
        ValueError: If the tool name is unknown.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        msg = f"Unknown tool: {name} (valid: {list(TOOL_HANDLERS)})"
        raise ValueError(msg)
    logger.debug("Executing tool %s", name)
    return handler(args or {}, profile, catalog)


__all__ = [
    "TOOL_HANDLERS",
    "dispatch_tool",
    "apply_profile_update",
    "update_business_profile",
    "search_lenders",
    "get_lender_requirements",
    "calculate_eligibility",
    "validate_province",
]
