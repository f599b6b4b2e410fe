"""Stacking plan: priced units grouped by floor, top floor first."""

from __future__ import annotations

from itertools import groupby

from stackplan.engine.floors import floor_sort_key, parse_int
from stackplan.engine.labels import floor_label
from stackplan.models.results import FloorStack
from stackplan.models.unit import Unit


def _unit_sort_key(unit: Unit) -> tuple[int, int, str]:
    number = parse_int(unit.unit)
    if number is not None:
        return (0, number, unit.unit)
    return (1, 0, unit.unit)


def build_stacking_plan(units: list[Unit]) -> list[FloorStack]:
    """One ``FloorStack`` per floor present, Penthouse down to Garden.

    Units within a floor are ordered by unit label, numerically when the
    label is a number.
    """
    by_floor = sorted(units, key=lambda unit: floor_sort_key(unit.floor))
    grouped = {floor: list(members) for floor, members in groupby(by_floor, key=lambda unit: unit.floor)}

    stacks: list[FloorStack] = []
    for floor in reversed(list(grouped)):
        members = sorted(grouped[floor], key=_unit_sort_key)
        stacks.append(FloorStack(
            floor=floor,
            label=floor_label(floor),
            units=members,
            unit_count=len(members),
            revenue=sum(unit.final_price for unit in members),
        ))
    return stacks
