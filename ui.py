from __future__ import annotations
import streamlit as st
from typing import Callable, Iterable, Optional, Tuple

def header(app_title: str) -> None:
    st.set_page_config(page_title=app_title, layout="wide")
    st.title(app_title)

def data_source_picker(
    default_path: str,
    expected_cols: Iterable[str],
    load_csv_text: Callable[[str], str],
    load_uploaded_text: Callable[[object], str],
    validate_columns: Callable[[str, Iterable[str]], Optional[str]],
    load_error: type,
) -> Tuple[str, str]:
    """Returns (csv_text, source_label); stops the page with an error if loading fails."""
    st.sidebar.header("Data")
    use_sample = st.sidebar.checkbox("Use sample data", value=True)
    uploaded = st.sidebar.file_uploader("Upload shipment CSV", type=["csv"])

    try:
        if use_sample:
            text, label = load_csv_text(default_path), default_path
        elif uploaded:
            text, label = load_uploaded_text(uploaded), uploaded.name
        else:
            st.info("Upload a file or check 'Use sample data' to get started.")
            st.stop()
    except load_error as e:
        st.error(str(e))
        st.stop()

    # best-effort: missing columns only degrade the report, so warn and carry on
    warn = validate_columns(text, expected_cols)
    if warn:
        st.warning(warn)

    return text, label

def as_of_caption(as_of_iso: str, source_label: str, invalid_date_count: int = 0) -> None:
    st.caption(f"As of: {as_of_iso} • Source: {source_label}")
    if invalid_date_count:
        st.caption(f"⚠️ {invalid_date_count} shipment(s) had unparseable dates and were treated as on time.")

def footer_description() -> None:
    with st.expander("ℹ️ Note: About this app and expected data format", expanded=False):
        st.markdown(
            """
            **Proof of concept:** load a shipment CSV export, compute **days late** per shipment,
            and surface the suppliers and handoff points where late shipments pile up.
            No integrations, no persistence.

            **Expected columns:**
            `shipment_id, po, supplier, carrier, status, planned_delivery, actual_delivery, handoff_point`

            Dates should be `YYYY-MM-DD`. Fields are split on every comma, so quoted values
            containing commas are not supported.
            """
        )
