"""German-locale display strings for euro amounts and percentages."""

from __future__ import annotations

import math

NBSP = "\u00a0"
MISSING = "–"


def _group_thousands(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ".".join(groups)


def format_number(value: float, fraction_digits: int = 0) -> str:
    """1234567.891 -> '1.234.567,89' for two fraction digits."""
    if not math.isfinite(value):
        return MISSING
    text = f"{abs(value):.{fraction_digits}f}"
    whole, _, fraction = text.partition(".")
    out = _group_thousands(whole)
    if fraction:
        out = f"{out},{fraction}"
    # no "-0" after rounding
    if value < 0 and text.strip("0.") != "":
        out = f"-{out}"
    return out


def format_eur(value: float, fraction_digits: int = 0) -> str:
    if not math.isfinite(value):
        return MISSING
    return f"{format_number(value, fraction_digits)}{NBSP}€"


def format_percent(value: float, fraction_digits: int = 1) -> str:
    """Format a percentage that is already scaled (1.5 -> '1,5 %')."""
    if not math.isfinite(value):
        return MISSING
    return f"{format_number(value, fraction_digits)}{NBSP}%"
