from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from sports_radar.core.projection import DetailView
from sports_radar.plotting.helpers import close_loop, suggested_radial_range

LINE_COLOR = "rgba(96, 165, 250, 1)"
FILL_COLOR = "rgba(59, 130, 246, 0.35)"
MARKER_COLOR = "rgba(248, 250, 252, 1)"
MARKER_LINE_COLOR = "rgba(15, 23, 42, 1)"
GRID_COLOR = "rgba(55, 65, 81, 0.7)"
AXIS_LINE_COLOR = "rgba(75, 85, 99, 0.7)"


@dataclass
class RadarPlotData:
    label: str = ""
    axes: list[str] = field(default_factory=list)
    values: np.ndarray = field(default_factory=lambda: np.zeros(0))
    hover_texts: list[str] = field(default_factory=list)
    radial_range: tuple[float, float] = (0.0, 100.0)


def prepare_radar_plot(detail: Optional[DetailView]) -> RadarPlotData:
    if detail is None:
        return RadarPlotData()
    points = list(detail.metric_series)
    axes = [p.label for p in points]
    values = np.asarray([p.value for p in points], dtype=float)
    hover = [f"{p.label}: {p.value_text}" for p in points]
    return RadarPlotData(
        label=detail.title,
        axes=list(close_loop(np.asarray(axes, dtype=object))),
        values=close_loop(values),
        hover_texts=list(close_loop(np.asarray(hover, dtype=object))),
        radial_range=suggested_radial_range(values),
    )
