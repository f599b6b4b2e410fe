"""Floor ordering: the one order used by floor-range rules, stacking and revenue keys.

Garden always sorts first and Penthouse last.  Labels that are whole
integers sort numerically between them, and any other label sorts
case-sensitively after the numeric floors.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

GARDEN = "Garden"
PENTHOUSE = "Penthouse"
_INTEGER = re.compile(r"-?[0-9]+")


def parse_int(label: str) -> int | None:
    """``int(label)`` or ``None`` when the label is not a whole integer.

    Only plain digits with an optional leading minus count; ``" 3"``,
    ``"+3"`` and ``"1_0"`` are names, not numbers.
    """
    if not isinstance(label, str) or _INTEGER.fullmatch(label) is None:
        return None
    return int(label)


def floor_sort_key(label: str) -> tuple[int, int, str]:
    """Sort key implementing the floor order.

    The trailing label breaks ties between numerically equal labels
    (``"3"`` vs ``"03"``) so the order stays total.
    """
    if label == GARDEN:
        return (0, 0, label)
    if label == PENTHOUSE:
        return (3, 0, label)
    number = parse_int(label)
    if number is not None:
        return (1, number, label)
    return (2, 0, label)


def order_floors(labels: Iterable[str]) -> list[str]:
    """Distinct floor labels, bottom floor first."""
    return sorted(set(labels), key=floor_sort_key)


def floor_level(unit_floor: str, start_floor: str, end_floor: str, ordered_floors: list[str]) -> int:
    """1-based position of ``unit_floor`` inside ``start_floor..end_floor``.

    Returns 0 when any of the three floors is unknown or the unit floor lies
    outside the inclusive range.
    """
    try:
        start = ordered_floors.index(start_floor)
        end = ordered_floors.index(end_floor)
        position = ordered_floors.index(unit_floor)
    except ValueError:
        return 0
    if position < start or position > end:
        return 0
    return position - start + 1
