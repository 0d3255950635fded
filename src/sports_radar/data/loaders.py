import re
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import requests

from sports_radar.core.state import METRICS, Metric, Record

SPORT_COLUMN = "Sport"
OVERALL_COLUMN = "Overall Score"
METRIC_COLUMNS: Dict[Metric, str] = {m: f"{m.label} Score" for m in METRICS}
SCORE_COLUMNS: List[str] = [OVERALL_COLUMN] + [METRIC_COLUMNS[m] for m in METRICS]
EXPECTED_COLUMNS: List[str] = [SPORT_COLUMN] + SCORE_COLUMNS

DELIMITER = ","
DEFAULT_DATA_SOURCE = "sports.csv"
HTTP_TIMEOUT = (10, 20)

_LINE_SPLIT = re.compile(r"\r?\n")


def _parse_float(text: str) -> float:
    # float() is correctly rounded; equal numbers written differently must tie
    try:
        return float(text)
    except ValueError:
        return np.nan


def coerce_scores(series: pd.Series) -> pd.Series:
    """Lenient score parsing: optional trailing '%', anything unparseable becomes 0."""
    text = series.astype(str).str.strip()
    text = text.str.replace(r"%$", "", regex=True).str.strip()
    values = text.map(_parse_float).astype(float)
    values = values.mask(~np.isfinite(values))
    return values.fillna(0.0)


def to_number(value: Any) -> float:
    return float(coerce_scores(pd.Series([value], dtype="object")).iloc[0])


def _split_lines(raw_text: str) -> List[str]:
    lines = (line.strip() for line in _LINE_SPLIT.split(str(raw_text or "")))
    return [line for line in lines if line]


def _column_index(headers: List[str], label: str) -> Optional[int]:
    try:
        return headers.index(label)
    except ValueError:
        return None


def scores_frame_from_text(raw_text: str) -> pd.DataFrame:
    """
    Build a frame with one column per expected label from delimited text.

    Columns are located by header label, so source column order is irrelevant.
    Labels missing from the header produce empty cells, which coerce to 0 later.
    Rows with an empty Sport cell are dropped.
    """
    lines = _split_lines(raw_text)
    if len(lines) <= 1:
        return pd.DataFrame(columns=EXPECTED_COLUMNS)

    headers = [h.strip() for h in lines[0].split(DELIMITER)]
    positions = {label: _column_index(headers, label) for label in EXPECTED_COLUMNS}

    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        cells = line.split(DELIMITER)
        row: Dict[str, str] = {}
        for label, idx in positions.items():
            row[label] = cells[idx] if idx is not None and idx < len(cells) else ""
        if not row[SPORT_COLUMN].strip():
            continue
        row[SPORT_COLUMN] = row[SPORT_COLUMN].strip()
        rows.append(row)

    return pd.DataFrame(rows, columns=EXPECTED_COLUMNS)


def frame_to_records(df: pd.DataFrame) -> List[Record]:
    if df is None or df.empty or SPORT_COLUMN not in df.columns:
        return []
    df = df.copy()
    for label in SCORE_COLUMNS:
        if label in df.columns:
            df[label] = coerce_scores(df[label])
        else:
            df[label] = 0.0

    df[SPORT_COLUMN] = df[SPORT_COLUMN].fillna("").astype(str).str.strip()
    df = df.loc[df[SPORT_COLUMN] != ""]

    records: List[Record] = []
    for row in df.to_dict(orient="records"):
        records.append(
            Record(
                name=str(row[SPORT_COLUMN]),
                overall=float(row[OVERALL_COLUMN]),
                metrics={m: float(row[METRIC_COLUMNS[m]]) for m in METRICS},
            )
        )
    return records


def records_to_frame(records: List[Record]) -> pd.DataFrame:
    rows = []
    for record in records:
        row: Dict[str, Any] = {SPORT_COLUMN: record.name, OVERALL_COLUMN: record.overall}
        for m in METRICS:
            row[METRIC_COLUMNS[m]] = record.metrics[m]
        rows.append(row)
    return pd.DataFrame(rows, columns=EXPECTED_COLUMNS)


def parse_scores_csv(raw_text: str) -> List[Record]:
    """Parse delimited sport scores. Never raises; malformed input degrades to fewer rows or zeros."""
    return frame_to_records(scores_frame_from_text(raw_text))


def _decode_bytes(raw: bytes) -> str:
    for enc in ("utf-8-sig", "utf-8", "cp1252", "latin-1"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    raise UnicodeDecodeError("utf-8", raw, 0, 1, "Unable to decode data source.")


def read_source_text(source: str) -> str:
    """Fetch raw text from an http(s) URL or a local file path."""
    source = str(source or "").strip()
    if not source:
        raise ValueError("No data source given.")
    if source.lower().startswith(("http://", "https://")):
        resp = requests.get(source, timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
        return resp.text
    with open(source, "rb") as f:
        return _decode_bytes(f.read())
