"""Tests for the table and detail projections."""

import copy

import pytest

from sports_radar.core.projection import (
    detail_subtitle,
    format_percent,
    project_detail,
    project_sort_header,
    project_table,
    title_case,
)
from sports_radar.core.state import METRICS, Metric, Record, SortDirection, SortState


@pytest.mark.parametrize(
    "value,expected",
    [
        (73.4, "73.40%"),
        (90, "90.00%"),
        (0, "0.00%"),
        (-0.0, "0.00%"),
        (0.125, "0.13%"),
        (99.999, "100.00%"),
        (-5, "-5.00%"),
        (1e30, "1000000000000000019884624838656.00%"),
    ],
)
def test_format_percent(value, expected):
    assert format_percent(value) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("ice hockey", "Ice Hockey"),
        ("mixed martial arts", "Mixed Martial Arts"),
        ("eSports", "ESports"),
        ("table  tennis", "Table  Tennis"),
        ("", ""),
    ],
)
def test_title_case(text, expected):
    assert title_case(text) == expected


def _records():
    return [
        Record("Boxing", 90, {Metric.ATHLETICS: 95}),
        Record("ice hockey", 75.5, {Metric.TACTICS: 70}),
        Record("Chess", 40, {Metric.ATHLETICS: 10}),
    ]


def test_project_table_ranks_and_formats():
    rows = project_table(_records(), "Boxing")
    assert [r.rank for r in rows] == [1, 2, 3]
    assert [r.display_name for r in rows] == ["Boxing", "Ice Hockey", "Chess"]
    assert rows[1].name == "ice hockey"
    assert rows[0].overall_text == "90.00%"
    assert rows[0].metric_texts[Metric.ATHLETICS] == "95.00%"
    assert rows[2].metric_texts[Metric.RULES] == "0.00%"
    assert [r.is_selected for r in rows] == [True, False, False]


def test_project_table_selection_is_case_insensitive():
    rows = project_table(_records(), "ICE HOCKEY")
    assert [r.is_selected for r in rows] == [False, True, False]


def test_project_table_without_selection():
    rows = project_table(_records(), None)
    assert not any(r.is_selected for r in rows)


def test_project_table_is_pure():
    records = _records()
    snapshot = copy.deepcopy(records)
    first = project_table(records, "Chess")
    second = project_table(records, "Chess")
    assert first == second
    assert records == snapshot


def test_project_detail():
    detail = project_detail(Record("ice hockey", 75.5, {Metric.ATHLETICS: 88}))
    assert detail.title == "Ice Hockey"
    assert detail.name == "ice hockey"
    assert detail.subtitle == "Radar profile across Athletics, Tactics, Spectacle, Pacing, and Rules."
    assert detail.overall_summary == "Overall score: 75.50%"
    assert [p.label for p in detail.metric_series] == [m.label for m in METRICS]
    assert [p.value_text for p in detail.metric_series] == ["88.00%", "0.00%", "0.00%", "0.00%", "0.00%"]


def test_detail_subtitle_single_metric():
    assert detail_subtitle([Metric.RULES]) == "Radar profile across Rules."


def test_project_sort_header():
    header = project_sort_header(SortState("name", SortDirection.ASCENDING))
    assert header.field == "name"
    assert header.ascending
    assert header.indicator == "▲"
    assert project_sort_header(SortState()).indicator == "▼"
