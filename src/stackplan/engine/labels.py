"""Human-readable labels for floors, counts and bands."""

from __future__ import annotations

from stackplan.engine.floors import GARDEN, PENTHOUSE, parse_int


def plain_number(value: float) -> str:
    """``2.0`` → ``"2"``, ``1.5`` → ``"1.5"``: the form list-pricing values are stored in."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def grouped_number(value: float) -> str:
    """Thousands-separated, without a trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def floor_label(floor: str) -> str:
    if floor == GARDEN:
        return "Garden Level"
    if floor == PENTHOUSE:
        return PENTHOUSE
    if parse_int(floor) is not None:
        return f"Floor {floor}"
    return floor


def count_label(value: str, noun: str) -> str:
    """``("2", "Bedroom")`` → ``"2 Bedrooms"``; singular only for exactly ``"1"``."""
    suffix = "" if value == "1" else "s"
    return f"{value} {noun}{suffix}"


def size_band_label(low: float, high: float) -> str:
    return f"{grouped_number(low)} - {grouped_number(high)} sqft"


def outdoor_band_label(low: float, high: float) -> str:
    if low == 0 and high == 0:
        return "No outdoor space"
    return f"{grouped_number(low)} - {grouped_number(high)} sqft outdoor"
