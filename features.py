from __future__ import annotations
import datetime as _dt
import logging
from typing import Iterable, List, Optional, Tuple, Union

from parsing import Row, parse_date

logger = logging.getLogger(__name__)

DateLike = Union[str, _dt.date]


def _resolve_dates(row: Row, today: DateLike) -> Tuple[Optional[str], Optional[_dt.date], Optional[_dt.date]]:
    """(planned_raw, planned, end); planned_raw is None when there is no plan at all."""
    planned_raw = (row.get("planned_delivery") or "").strip()
    if not planned_raw:
        return None, None, None
    actual_raw = (row.get("actual_delivery") or "").strip()
    end = parse_date(actual_raw) if actual_raw else parse_date(today)
    return planned_raw, parse_date(planned_raw), end


def compute_days_late(row: Row, today: DateLike) -> int:
    """
    Whole calendar days between planned_delivery and actual_delivery
    (or `today` when not delivered yet), clamped at 0.

    Rows without a plan, or with a date that does not parse, count as 0.
    """
    planned_raw, planned, end = _resolve_dates(row, today)
    if planned_raw is None:
        return 0
    if planned is None or end is None:
        logger.debug(
            "Unparseable date for shipment %s (planned=%r, actual=%r); days_late=0",
            row.get("shipment_id", "?"), row.get("planned_delivery"), row.get("actual_delivery"),
        )
        return 0
    diff = (end - planned).days
    return diff if diff > 0 else 0


def has_invalid_dates(row: Row, today: DateLike) -> bool:
    planned_raw, planned, end = _resolve_dates(row, today)
    return planned_raw is not None and (planned is None or end is None)


def annotate_days_late(rows: Iterable[Row], today: DateLike) -> List[Row]:
    out = list(rows)
    for r in out:
        r["days_late"] = compute_days_late(r, today)
    return out
