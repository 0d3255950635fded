from __future__ import annotations

from functools import cmp_to_key
from typing import Union

from sports_radar.core.state import (
    NAME_FIELD,
    DashboardState,
    Metric,
    Record,
    SortDirection,
    normalize_direction,
    normalize_sort_field,
)
from sports_radar.utils.sortkeys import name_sort_key


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _name_tiebreak(a: Record, b: Record) -> int:
    return _cmp(name_sort_key(a.name), name_sort_key(b.name))


def compare_records(a: Record, b: Record, sort_field: str, direction: SortDirection) -> int:
    if sort_field == NAME_FIELD:
        primary = _cmp(a.name.casefold(), b.name.casefold())
    else:
        primary = _cmp(a.value(sort_field), b.value(sort_field))
    if primary == 0:
        # ties always resolve by ascending name, whatever the direction
        return _name_tiebreak(a, b)
    return primary if direction is SortDirection.ASCENDING else -primary


def sort_records(
    records: list[Record],
    sort_field: Union[str, Metric],
    direction: Union[str, SortDirection],
) -> None:
    key_field = normalize_sort_field(sort_field)
    key_dir = normalize_direction(direction)
    records.sort(key=cmp_to_key(lambda a, b: compare_records(a, b, key_field, key_dir)))


def apply_sort(state: DashboardState) -> None:
    sort_records(state.records, state.sort.field, state.sort.direction)
