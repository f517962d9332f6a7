from __future__ import annotations
from typing import Sequence, Mapping
import streamlit as st
import pandas as pd
from constants import EMPTY_CELL, LATE_TABLE_COLS

_DASH_IF_EMPTY = ["planned_delivery", "actual_delivery", "handoff_point"]

def late_rows_frame(rows: Sequence[Mapping[str, object]]) -> pd.DataFrame:
    df = pd.DataFrame(list(rows), columns=LATE_TABLE_COLS)
    for col in LATE_TABLE_COLS:
        if col != "days_late":
            df[col] = df[col].fillna("").astype(str)
    df["days_late"] = pd.to_numeric(df["days_late"], errors="coerce").fillna(0).astype(int)
    return df

def display_frame(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    for col in _DASH_IF_EMPTY:
        out[col] = out[col].where(out[col].str.strip() != "", EMPTY_CELL)
    return out

def late_shipments_table(rows: Sequence[Mapping[str, object]]) -> None:
    st.subheader("🚨 Top Late Shipments")
    if rows:
        st.dataframe(display_frame(late_rows_frame(rows)), use_container_width=True, hide_index=True)
    else:
        st.info("No late shipments. 🎉")

def download_late(rows: Sequence[Mapping[str, object]]) -> None:
    csv = late_rows_frame(rows).to_csv(index=False).encode("utf-8")
    st.download_button("Download all late shipments (CSV)", csv, "late_shipments.csv", "text/csv")

def data_dictionary_expander() -> None:
    with st.expander("Data Dictionary"):
        st.markdown(
            '''
- **days_late** = planned_delivery → actual_delivery in whole days (today if not delivered yet), never below 0
- **late** = days_late > 0
- **On-time %** = (shipments − late) / shipments × 100
- **Avg days late** = mean days_late over late shipments only
- Missing supplier / handoff_point are grouped as **Unknown**
- Shipments with no planned_delivery or an unparseable date count as on time
'''
        )
