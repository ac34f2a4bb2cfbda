"""Province validation tool."""

from __future__ import annotations

from src.decoders.province import normalize_province
from src.models.enums import Province
from src.schemas.tools import ProvinceValidation


def validate_province(province: str | None) -> ProvinceValidation:
    """Check a province name and return its standard form, or the valid options."""
    if province is None or not province.strip():
        return ProvinceValidation(valid=False, original_input=province, message="Province name is required")

    standard = normalize_province(province)
    if standard is not None:
        return ProvinceValidation(
            valid=True,
            original_input=province,
            standard_name=standard.value,
            message=f"Valid province: {standard.value}",
        )

    options = [p.value for p in Province]
    return ProvinceValidation(
        valid=False,
        original_input=province,
        message=f"'{province}' is not a valid SA province. Valid provinces: {', '.join(options)}",
        suggestions=options,
    )
