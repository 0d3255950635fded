from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sports_radar.core.state import DashboardState, Metric, Record


@dataclass
class SelectionResult:
    record: Record
    metrics: dict[Metric, float] = field(default_factory=dict)


def select(state: DashboardState, name: str) -> Optional[SelectionResult]:
    """Make ``name`` the active record; unknown names leave the selection untouched."""
    record = state.find(name)
    if record is None:
        return None
    state.selected = record.name
    return SelectionResult(record=record, metrics=dict(record.metrics))


def selected_record(state: DashboardState) -> Optional[Record]:
    if state.selected is None:
        return None
    return state.find(state.selected)


def select_first(state: DashboardState) -> Optional[SelectionResult]:
    if not state.records:
        return None
    return select(state, state.records[0].name)
