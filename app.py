# app.py
from __future__ import annotations
import datetime as _dt
import logging
from typing import Optional
import streamlit as st

from constants import APP_TITLE, DEFAULT_CSV_PATH, EXPECTED_COLS
from data_io import DataLoadError, load_csv_text, load_uploaded_text, validate_columns
from report import build_report, resolve_as_of
from kpis import render_kpis
from charts import render_bottlenecks
from tables import late_shipments_table, download_late, data_dictionary_expander

from app_secrets import get_secret
from ui import header, data_source_picker, as_of_caption, footer_description

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    log_level = get_secret("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _as_of() -> Optional[_dt.date]:
    # AS_OF_DATE pins "today" for demos; otherwise use the UTC calendar date
    fixed = get_secret("AS_OF_DATE")
    if fixed:
        return resolve_as_of(fixed)
    return _dt.datetime.now(_dt.timezone.utc).date()


def main() -> None:
    _configure_logging()
    header(APP_TITLE)

    text, source = data_source_picker(
        get_secret("SHIPMENTS_CSV", DEFAULT_CSV_PATH),
        EXPECTED_COLS,
        load_csv_text,
        load_uploaded_text,
        validate_columns,
        DataLoadError,
    )

    as_of = _as_of()
    if as_of is None:
        logger.error("Bad AS_OF_DATE setting: %r", get_secret("AS_OF_DATE"))
        st.error("Invalid AS_OF_DATE setting; expected YYYY-MM-DD.")
        st.stop()

    report = build_report(text, as_of)
    as_of_caption(report.as_of.isoformat(), source, report.invalid_date_count)

    # KPIs
    st.divider()
    render_kpis(report)

    # Bottlenecks
    st.divider()
    render_bottlenecks(report.by_supplier, report.by_handoff)

    # Table + download
    st.divider()
    late_shipments_table(report.top_late)
    download_late(report.late_rows)

    # Data dictionary + footer
    st.divider()
    data_dictionary_expander()
    footer_description()


if __name__ == "__main__":
    main()
