from __future__ import annotations
import math
from typing import Optional, Tuple, TYPE_CHECKING
import streamlit as st
from constants import KPI_FORMATS, EMPTY_CELL

if TYPE_CHECKING:
    from report import ShipmentReport


def format_worst(entry: Optional[Tuple[str, int]]) -> str:
    return f"{entry[0]} ({entry[1]})" if entry else EMPTY_CELL


def format_percent(value: float) -> str:
    # round half up: 62.5 -> 63%
    return KPI_FORMATS["on_time_percent"].format(math.floor(value + 0.5))


def render_kpis(report: "ShipmentReport") -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Shipments", KPI_FORMATS["total_count"].format(report.total_count))
    c2.metric("Late", KPI_FORMATS["late_count"].format(report.late_count))
    c3.metric("On-time %", format_percent(report.on_time_percent))
    c4.metric("Avg days late", KPI_FORMATS["avg_late_days"].format(report.avg_late_days))

    w1, w2 = st.columns(2)
    w1.metric("Worst supplier", format_worst(report.worst_supplier))
    w2.metric("Worst handoff point", format_worst(report.worst_handoff))
