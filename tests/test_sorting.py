"""Tests for ordering records by a field with the ascending-name tie-break."""

import pytest

from sports_radar.core.sorting import compare_records, sort_records
from sports_radar.core.state import Metric, Record, SortDirection


def _names(records):
    return [r.name for r in records]


def _rec(name, overall=0.0, **metrics):
    return Record(name=name, overall=overall, metrics={Metric(k): v for k, v in metrics.items()})


def test_overall_descending_ties_break_alphabetically():
    records = [_rec("Chess", 40), _rec("Archery", 40)]
    sort_records(records, "overall", "desc")
    assert _names(records) == ["Archery", "Chess"]


def test_tie_break_is_ascending_in_both_directions():
    records = [_rec("Chess", 40), _rec("Boxing", 90), _rec("Archery", 40)]
    sort_records(records, "overall", SortDirection.ASCENDING)
    assert _names(records) == ["Archery", "Chess", "Boxing"]
    sort_records(records, "overall", SortDirection.DESCENDING)
    assert _names(records) == ["Boxing", "Archery", "Chess"]


def test_resorting_same_field_keeps_tied_rows_stable():
    records = [_rec("Delta", 50), _rec("alpha", 50), _rec("Charlie", 50), _rec("Bravo", 50)]
    sort_records(records, "overall", "desc")
    first = _names(records)
    sort_records(records, "overall", "desc")
    assert _names(records) == first == ["alpha", "Bravo", "Charlie", "Delta"]


def test_sort_by_metric_accepts_enum_and_key():
    records = [_rec("A", athletics=10), _rec("B", athletics=80), _rec("C", athletics=45)]
    sort_records(records, Metric.ATHLETICS, "asc")
    assert _names(records) == ["A", "C", "B"]
    sort_records(records, "athletics", "desc")
    assert _names(records) == ["B", "C", "A"]


def test_sort_by_name_is_lexical_and_case_insensitive():
    records = [_rec("chess"), _rec("Boxing"), _rec("archery")]
    sort_records(records, "name", "asc")
    assert _names(records) == ["archery", "Boxing", "chess"]
    sort_records(records, "name", "desc")
    assert _names(records) == ["chess", "Boxing", "archery"]


def test_sort_by_name_case_variants_tie_break_ascending():
    records = [_rec("go"), _rec("Go")]
    sort_records(records, "name", "desc")
    assert _names(records) == ["Go", "go"]
    sort_records(records, "name", "asc")
    assert _names(records) == ["Go", "go"]


def test_sort_handles_out_of_range_values():
    records = [_rec("Low", -5), _rec("High", 140), _rec("Mid", 50)]
    sort_records(records, "overall", "desc")
    assert _names(records) == ["High", "Mid", "Low"]


def test_sort_empty_collection():
    records = []
    sort_records(records, "overall", "desc")
    assert records == []


def test_unknown_field_raises():
    with pytest.raises(ValueError):
        sort_records([_rec("A")], "rank", "desc")


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        sort_records([_rec("A")], "overall", "sideways")


def test_compare_records_sign():
    a, b = _rec("A", 10), _rec("B", 20)
    assert compare_records(a, b, "overall", SortDirection.ASCENDING) < 0
    assert compare_records(a, b, "overall", SortDirection.DESCENDING) > 0
    assert compare_records(a, a, "overall", SortDirection.DESCENDING) == 0
