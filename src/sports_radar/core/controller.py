from __future__ import annotations

from typing import Optional, Union

import requests

from sports_radar.core.projection import DetailView, TableRow, project_detail, project_table
from sports_radar.core.selection import select, select_first, selected_record
from sports_radar.core.sorting import apply_sort
from sports_radar.core.state import (
    DashboardState,
    Metric,
    SortDirection,
    normalize_sort_field,
)
from sports_radar.data.loaders import parse_scores_csv, read_source_text
from sports_radar.utils.log import log_event, log_exception


class DashboardController:
    """
    Owns the dashboard state and turns user actions into state transitions.

    The binding layer calls ``on_header_click``/``on_row_click`` and renders the
    projections these return; no decisions live in widget callbacks.
    """

    def __init__(self, state: Optional[DashboardState] = None):
        self.state = state if state is not None else DashboardState()

    def load_text(self, raw_text: str) -> int:
        self.state.records = parse_scores_csv(raw_text)
        self.state.selected = None
        apply_sort(self.state)
        select_first(self.state)
        log_event("load", f"{len(self.state.records)} sport(s) loaded")
        return len(self.state.records)

    def load_source(self, source: str) -> bool:
        try:
            raw_text = read_source_text(source)
        except (OSError, ValueError, requests.RequestException):
            log_exception(f"Failed to load data from {source!r}")
            self.state.clear()
            return False
        self.load_text(raw_text)
        return True

    def on_header_click(self, sort_field: Union[str, Metric]) -> list[TableRow]:
        key = normalize_sort_field(sort_field)
        sort = self.state.sort
        if key == sort.field:
            sort.direction = sort.direction.toggled()
        else:
            sort.field = key
            sort.direction = SortDirection.DESCENDING
        apply_sort(self.state)
        return self.table()

    def on_row_click(self, name: str) -> Optional[DetailView]:
        if select(self.state, name) is None:
            return None
        return self.detail()

    def table(self) -> list[TableRow]:
        return project_table(self.state.records, self.state.selected)

    def detail(self) -> Optional[DetailView]:
        record = selected_record(self.state)
        if record is None:
            return None
        return project_detail(record)
