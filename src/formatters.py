"""Formatting helpers for South African Rand amounts, speeds and rates.

Used by the rule messages, lever strings and tool results.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_THOUSAND = Decimal("1000")
_MILLION = Decimal("1000000")


def _scaled(value: Decimal, unit: Decimal) -> str:
    """Whole number when exact, otherwise one decimal place."""
    scaled = value / unit
    if value % unit == 0:
        return f"{scaled.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}"
    return f"{scaled.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}"


def format_amount(value: Decimal | float | int | None) -> str:
    """Compact amount without currency: 2000000 -> "2M", 750000 -> "750k"."""
    if value is None:
        return "-"
    d = Decimal(str(value))
    if d >= _MILLION:
        return f"{_scaled(d, _MILLION)}M"
    if d >= _THOUSAND:
        return f"{_scaled(d, _THOUSAND)}k"
    return f"{d.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}"


def format_rand(value: Decimal | float | int | None) -> str:
    """Compact Rand amount: 50000 -> "R50k", 1500000 -> "R1.5M"."""
    if value is None:
        return "-"
    return f"R{format_amount(value)}"


def format_rand_full(value: Decimal | float | int | None) -> str:
    """Rand amount with thousands separators: 750000 -> "R750,000"."""
    if value is None:
        return "-"
    d = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"R{d:,}"


def format_years(value: float | int | None) -> str:
    """Trading years: 2.0 -> "2y", 1.5 -> "1.5y"."""
    if value is None:
        return "-"
    return f"{value:g}y"


def format_speed(speed_days: tuple[int, int]) -> str:
    """Funding turnaround: (1, 1) -> "1 day", (2, 3) -> "2-3 days"."""
    fastest, slowest = speed_days
    if fastest == slowest:
        return f"{fastest} day{'s' if fastest != 1 else ''}"
    return f"{fastest}-{slowest} days"


def format_rate(interest_rate: tuple[float, float] | None) -> str:
    """Interest range: (14, 22) -> "14-22%". Empty string when unknown."""
    if interest_rate is None:
        return ""
    low, high = interest_rate
    if low == high:
        return f"{low:g}%"
    return f"{low:g}-{high:g}%"
