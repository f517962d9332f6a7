from __future__ import annotations
import datetime as _dt
import re
from typing import Dict, List, Optional, Sequence
import pandas as pd

Row = Dict[str, str]

_LINE_SPLIT = re.compile(r"\r?\n")
# pandas maps these to the current wall-clock time
_RELATIVE_WORDS = {"today", "now"}


def _split_fields(line: str) -> List[str]:
    return [c.strip() for c in line.split(",")]


def parse_headers(text: str) -> List[str]:
    text = (text or "").strip()
    if not text:
        return []
    return _split_fields(_LINE_SPLIT.split(text, maxsplit=1)[0])


def parse_csv(text: str) -> List[Row]:
    """
    Turn raw CSV text into row records keyed by the header line.

    Deliberately simple: fields are split on every comma, so quoted fields
    with embedded commas are NOT supported.
    - Short rows get "" for their missing trailing fields
    - Extra trailing fields beyond the header are ignored
    - Empty text gives no headers and no rows
    """
    text = (text or "").strip()
    if not text:
        return []
    lines = _LINE_SPLIT.split(text)
    headers = _split_fields(lines[0])
    rows: List[Row] = []
    for line in lines[1:]:
        cols = _split_fields(line)
        rows.append({h: (cols[i] if i < len(cols) else "") for i, h in enumerate(headers)})
    return rows


def to_csv_line(row: Row, headers: Sequence[str]) -> str:
    """Serialize a row's raw fields back to one CSV line (derived fields are skipped)."""
    return ",".join(str(row.get(h, "")) for h in headers)


def parse_date(value) -> Optional[_dt.date]:
    """
    Parse a calendar-date string into a date-only value.
    Returns None for empty or unparseable input; time-of-day and tz are dropped.
    """
    if isinstance(value, _dt.datetime):  # includes pd.Timestamp / NaT
        return None if pd.isna(value) else value.date()
    if isinstance(value, _dt.date):
        return value
    s = str(value or "").strip()
    if not s or s.lower() in _RELATIVE_WORDS:
        return None
    try:
        ts = pd.to_datetime(s, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts.date()
