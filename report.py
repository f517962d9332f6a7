"""
Shipment lateness report: CSV text + reference date -> ShipmentReport.

Pure and deterministic; no Streamlit, no I/O. The UI layer renders the result.
"""
from __future__ import annotations
import datetime as _dt
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple, Union

from aggregation import group_count
from constants import TOP_LATE_LIMIT
from features import annotate_days_late, has_invalid_dates
from parsing import Row, parse_csv, parse_date

logger = logging.getLogger(__name__)

Entry = Tuple[str, int]


@dataclass(frozen=True)
class ShipmentReport:
    as_of: Optional[_dt.date]
    total_count: int
    late_count: int
    on_time_percent: float
    avg_late_days: float
    by_supplier: Tuple[Entry, ...]
    by_handoff: Tuple[Entry, ...]
    top_late: Tuple[Row, ...]
    invalid_date_count: int = 0
    late_rows: Tuple[Row, ...] = ()

    @property
    def worst_supplier(self) -> Optional[Entry]:
        return self.by_supplier[0] if self.by_supplier else None

    @property
    def worst_handoff(self) -> Optional[Entry]:
        return self.by_handoff[0] if self.by_handoff else None


def compute_kpis(total: int, late_days: Sequence[int]) -> Dict[str, float]:
    late = len(late_days)
    on_time = ((total - late) / total) * 100.0 if total else 0.0
    avg_late = float(sum(late_days)) / late if late else 0.0
    return dict(on_time_percent=on_time, avg_late_days=avg_late)


def resolve_as_of(today: Union[str, _dt.date]) -> Optional[_dt.date]:
    """
    Reference date as a date, or None when the string does not parse.
    Only a non-string, non-date argument raises.
    """
    if isinstance(today, _dt.datetime):
        return today.date()
    if isinstance(today, _dt.date):
        return today
    if not isinstance(today, str):
        raise TypeError(f"today must be an ISO date string or date, got {type(today).__name__}")
    return parse_date(today)


def build_report(csv_text: str, today: Union[str, _dt.date]) -> ShipmentReport:
    if not isinstance(csv_text, str):
        raise TypeError(f"csv_text must be str, got {type(csv_text).__name__}")
    as_of = resolve_as_of(today)
    if as_of is None:
        logger.warning("Unparseable reference date %r; undelivered shipments count as not late", today)
    # an unparseable string is passed through so only rows that need it fall back to 0
    reference = as_of if as_of is not None else today

    rows = annotate_days_late(parse_csv(csv_text), reference)
    invalid = sum(1 for r in rows if has_invalid_dates(r, reference))

    # stable sort keeps input order among equal days_late
    late = sorted((r for r in rows if r["days_late"] > 0), key=lambda r: r["days_late"], reverse=True)
    kpis = compute_kpis(len(rows), [r["days_late"] for r in late])

    report = ShipmentReport(
        as_of=as_of,
        total_count=len(rows),
        late_count=len(late),
        on_time_percent=kpis["on_time_percent"],
        avg_late_days=kpis["avg_late_days"],
        by_supplier=tuple(group_count(late, "supplier")),
        by_handoff=tuple(group_count(late, "handoff_point")),
        top_late=tuple(late[:TOP_LATE_LIMIT]),
        invalid_date_count=invalid,
        late_rows=tuple(late),
    )

    if invalid:
        logger.warning("%d shipment(s) had unparseable dates and were counted as not late", invalid)
    logger.info(
        "Report as of %s: %d shipments, %d late (%.1f%% on time, avg %.1f days late)",
        as_of.isoformat() if as_of else repr(today), report.total_count, report.late_count,
        report.on_time_percent, report.avg_late_days,
    )
    return report
