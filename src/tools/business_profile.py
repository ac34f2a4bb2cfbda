"""Business profile update tool.

The extraction step hands over a sparse patch holding only newly learnt
fields. Merging never lets a null wipe out something already known.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from src.decoders.province import normalize_province
from src.schemas.eligibility import BusinessProfile, ContactDetails
from src.schemas.tools import ProfileUpdateResult

logger = logging.getLogger(__name__)

# Flat contact keys produced by the extraction schema
_FLAT_CONTACT_KEYS: dict[str, str] = {
    "contactName": "name",
    "contactEmail": "email",
    "contactPhone": "phone",
}


def _lift_flat_contact(patch: Mapping[str, Any]) -> dict[str, Any]:
    data = dict(patch)
    flat = {
        field: data.pop(key)
        for key, field in _FLAT_CONTACT_KEYS.items()
        if key in data
    }
    if flat:
        contact = dict(data.get("contact") or {})
        contact.update(flat)
        data["contact"] = contact
    return data


def apply_profile_update(profile: BusinessProfile, patch: Mapping[str, Any]) -> BusinessProfile:
    """Return a new profile with the patch merged in.

    Keys may be camelCase or snake_case. ``None`` values and unknown keys are
    ignored. A recognised province is stored under its standard name.

    Raises:
        pydantic.ValidationError: If a patched value is invalid (e.g. negative turnover).
    """
    incoming = BusinessProfile.model_validate(_lift_flat_contact(patch))
    updates = incoming.model_dump(exclude_none=True)

    if "contact" in updates:
        known = profile.contact.model_dump(exclude_none=True) if profile.contact else {}
        updates["contact"] = ContactDetails(**{**known, **updates["contact"]})

    if "province" in updates:
        standard = normalize_province(updates["province"])
        if standard is not None:
            updates["province"] = standard.value

    return profile.model_copy(update=updates)


def update_business_profile(profile: BusinessProfile, args: Mapping[str, Any]) -> ProfileUpdateResult:
    """Tool handler: merge extracted fields and report what changed."""
    try:
        updated = apply_profile_update(profile, args)
    except ValidationError as exc:
        logger.warning("Rejected profile update with %d invalid field(s)", exc.error_count())
        invalid = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        return ProfileUpdateResult(
            success=False,
            profile=profile,
            message=f"Invalid value for: {', '.join(invalid)}",
        )

    changed = [
        to_camel(name)
        for name in type(updated).model_fields
        if getattr(updated, name) != getattr(profile, name)
    ]
    logger.info("Profile updated: %s", changed)
    return ProfileUpdateResult(
        success=True,
        profile=updated,
        updated=changed,
        message=f"Successfully updated {len(changed)} field(s)",
    )
