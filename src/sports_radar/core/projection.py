"""
Display-ready snapshots of the dashboard state.

Everything here is a pure function of its arguments: the table rows, the
detail panel and the sort indicator are rebuilt from scratch on every state
change instead of being patched. Inputs are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, Optional

from sports_radar.core.state import METRICS, Metric, Record, SortDirection, SortState

PERCENT_QUANTUM = Decimal("0.01")
_WIDE = Context(prec=400)


@dataclass(frozen=True)
class MetricPoint:
    key: str
    label: str
    value: float
    value_text: str


@dataclass(frozen=True)
class TableRow:
    rank: int
    name: str
    display_name: str
    overall: float
    overall_text: str
    metrics: dict[Metric, float] = field(default_factory=dict)
    metric_texts: dict[Metric, str] = field(default_factory=dict)
    is_selected: bool = False


@dataclass(frozen=True)
class DetailView:
    name: str
    title: str
    subtitle: str
    overall_summary: str
    metric_series: tuple[MetricPoint, ...] = ()


@dataclass(frozen=True)
class SortHeader:
    field: str
    ascending: bool

    @property
    def indicator(self) -> str:
        return "▲" if self.ascending else "▼"


def format_percent(value: float) -> str:
    # half away from zero on the exact binary value, so 0.125 -> "0.13%"
    if value == 0:
        return "0.00%"
    quantized = Decimal(float(value)).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP, context=_WIDE)
    return f"{quantized}%"


def title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in str(text).split(" "))


def names_match(a: Optional[str], b: Optional[str]) -> bool:
    if a is None or b is None:
        return False
    return a.casefold() == b.casefold()


def metric_series(record: Record) -> tuple[MetricPoint, ...]:
    return tuple(
        MetricPoint(
            key=m.key,
            label=m.label,
            value=record.metrics[m],
            value_text=format_percent(record.metrics[m]),
        )
        for m in METRICS
    )


def detail_subtitle(metrics: Iterable[Metric] = METRICS) -> str:
    labels = [m.label for m in metrics]
    if len(labels) > 1:
        listed = ", ".join(labels[:-1]) + ", and " + labels[-1]
    else:
        listed = "".join(labels)
    return f"Radar profile across {listed}."


def project_table(records: Iterable[Record], selected: Optional[str]) -> list[TableRow]:
    rows: list[TableRow] = []
    for rank, record in enumerate(records, start=1):
        rows.append(
            TableRow(
                rank=rank,
                name=record.name,
                display_name=title_case(record.name),
                overall=record.overall,
                overall_text=format_percent(record.overall),
                metrics=dict(record.metrics),
                metric_texts={m: format_percent(v) for m, v in record.metrics.items()},
                is_selected=names_match(record.name, selected),
            )
        )
    return rows


def project_detail(record: Record) -> DetailView:
    return DetailView(
        name=record.name,
        title=title_case(record.name),
        subtitle=detail_subtitle(),
        overall_summary=f"Overall score: {format_percent(record.overall)}",
        metric_series=metric_series(record),
    )


def project_sort_header(sort: SortState) -> SortHeader:
    return SortHeader(field=sort.field, ascending=sort.direction is SortDirection.ASCENDING)
