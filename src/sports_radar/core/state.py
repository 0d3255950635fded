from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Metric(Enum):
    ATHLETICS = "athletics"
    TACTICS = "tactics"
    SPECTACLE = "spectacle"
    PACING = "pacing"
    RULES = "rules"

    @property
    def key(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Enum iteration order is the column order and the radar axis order.
METRICS: tuple[Metric, ...] = tuple(Metric)

NAME_FIELD = "name"
OVERALL_FIELD = "overall"
SORT_FIELDS: tuple[str, ...] = (NAME_FIELD, OVERALL_FIELD) + tuple(m.key for m in METRICS)


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


def normalize_sort_field(sort_field: Union[str, Metric]) -> str:
    if isinstance(sort_field, Metric):
        return sort_field.key
    key = str(sort_field or "").strip()
    if key not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {sort_field!r}")
    return key


def normalize_direction(direction: Union[str, SortDirection]) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    try:
        return SortDirection(str(direction).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown sort direction: {direction!r}") from None


@dataclass
class Record:
    name: str
    overall: float = 0.0
    metrics: dict[Metric, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # exactly one value per metric, in metric order
        self.metrics = {m: float(self.metrics.get(m, 0.0)) for m in METRICS}
        self.overall = float(self.overall)

    def value(self, sort_field: Union[str, Metric]) -> Union[float, str]:
        key = normalize_sort_field(sort_field)
        if key == NAME_FIELD:
            return self.name
        if key == OVERALL_FIELD:
            return self.overall
        return self.metrics[Metric(key)]


@dataclass
class SortState:
    field: str = OVERALL_FIELD
    direction: SortDirection = SortDirection.DESCENDING


@dataclass
class DashboardState:
    """Session state shared by the sort, selection and projection steps."""

    records: list[Record] = field(default_factory=list)
    sort: SortState = field(default_factory=SortState)
    selected: Optional[str] = None

    def clear(self) -> None:
        self.records.clear()
        self.sort = SortState()
        self.selected = None

    def find(self, name: str) -> Optional[Record]:
        for record in self.records:
            if record.name == name:
                return record
        return None
