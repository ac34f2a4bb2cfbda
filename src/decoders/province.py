"""Province name → standard South African province lookup.

Pure Python. Maps the spellings applicants actually type (abbreviations,
major cities, hyphen variants) onto the nine standard province names.
"""

from __future__ import annotations

from src.models.enums import Province

# Lower-case aliases per province; the standard name itself always matches.
PROVINCE_ALIASES: dict[Province, tuple[str, ...]] = {
    Province.GAUTENG: ("gauteng", "gautang", "gt", "jhb", "johannesburg", "pretoria"),
    Province.WESTERN_CAPE: ("western cape", "wc", "cape town", "ct", "w cape", "western-cape"),
    Province.KWAZULU_NATAL: ("kwazulu-natal", "kzn", "natal", "durban", "kwazulu natal"),
    Province.EASTERN_CAPE: ("eastern cape", "ec", "e cape", "eastern-cape", "port elizabeth"),
    Province.FREE_STATE: ("free state", "fs", "freestate", "bloemfontein"),
    Province.LIMPOPO: ("limpopo", "lp", "polokwane"),
    Province.MPUMALANGA: ("mpumalanga", "mp", "nelspruit"),
    Province.NORTH_WEST: ("north west", "nw", "northwest", "north-west"),
    Province.NORTHERN_CAPE: ("northern cape", "nc", "n cape", "northern-cape", "kimberley"),
}

_LOOKUP: dict[str, Province] = {
    alias: province
    for province, aliases in PROVINCE_ALIASES.items()
    for alias in (*aliases, province.value.lower())
}


def normalize_province(name: str | None) -> Province | None:
    """Return the standard province for a free-text name, or None if unknown."""
    if name is None:
        return None
    return _LOOKUP.get(" ".join(name.lower().split()))


def province_key(name: str) -> str:
    """Comparison key: the standard name when recognised, else the trimmed input.

    Lets a catalog allow-list written as "KZN" match a profile saying
    "KwaZulu-Natal", while unknown strings still compare as themselves.
    """
    province = normalize_province(name)
    if province is not None:
        return province.value
    return name.strip()
