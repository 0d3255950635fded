from __future__ import annotations

from typing import Any, Optional

import numpy as np
import pandas as pd

from sports_radar.core.sorting import apply_sort
from sports_radar.core.state import (
    DashboardState,
    SortState,
    normalize_direction,
    normalize_sort_field,
)
from sports_radar.data.loaders import frame_to_records, records_to_frame

SESSION_VERSION = 1


def df_to_jsonable_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert DataFrame to JSON-safe list-of-dicts (np types -> Python, NaN -> None)."""
    df2 = df.astype(object).where(pd.notna(df), None)
    out: list[dict[str, Any]] = []
    for rec in df2.to_dict(orient="records"):
        clean: dict[str, Any] = {}
        for k, v in rec.items():
            if isinstance(v, np.generic):
                v = v.item()
            clean[k] = v
        out.append(clean)
    return out


def build_session_payload(state: DashboardState) -> dict[str, Any]:
    return {
        "version": SESSION_VERSION,
        "records": df_to_jsonable_records(records_to_frame(state.records)),
        "sort": {
            "field": state.sort.field,
            "direction": state.sort.direction.value,
        },
        "selected": state.selected,
    }


def _sort_from_payload(obj: Any) -> Optional[SortState]:
    if not isinstance(obj, dict):
        return None
    try:
        return SortState(
            field=normalize_sort_field(obj.get("field")),
            direction=normalize_direction(obj.get("direction")),
        )
    except ValueError:
        return None


def state_from_payload(payload: Any) -> DashboardState:
    """Rebuild session state; anything unusable falls back to the defaults."""
    state = DashboardState()
    if not isinstance(payload, dict):
        return state

    rows = payload.get("records")
    if isinstance(rows, list) and rows and all(isinstance(r, dict) for r in rows):
        state.records = frame_to_records(pd.DataFrame(rows))

    sort = _sort_from_payload(payload.get("sort"))
    if sort is not None:
        state.sort = sort
    apply_sort(state)

    selected = payload.get("selected")
    if isinstance(selected, str) and state.find(selected) is not None:
        state.selected = selected
    return state
