from __future__ import annotations
from typing import Sequence, Tuple
import pandas as pd
import altair as alt
import streamlit as st

Entry = Tuple[str, int]

def bottleneck_frame(entries: Sequence[Entry], dimension: str) -> pd.DataFrame:
    return pd.DataFrame(list(entries), columns=[dimension, "late_shipments"])

def bottleneck_chart(entries: Sequence[Entry], dimension: str, title: str) -> alt.Chart:
    data = bottleneck_frame(entries, dimension).head(12)
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("late_shipments:Q", title="Late shipments"),
            y=alt.Y(f"{dimension}:N", sort="-x", title=title),
            tooltip=[dimension, "late_shipments"],
        )
    )

def ranked_list_markdown(entries: Sequence[Entry]) -> str:
    return "\n".join(f"{i}. {k}: {v}" for i, (k, v) in enumerate(entries, start=1))

def _bottleneck_panel(entries: Sequence[Entry], dimension: str, title: str) -> None:
    st.subheader(f"Late by {title}")
    if not entries:
        st.info("No late shipments.")
        return
    st.altair_chart(bottleneck_chart(entries, dimension, title), use_container_width=True)
    with st.expander("Ranked list", expanded=False):
        st.markdown(ranked_list_markdown(entries))

def render_bottlenecks(by_supplier: Sequence[Entry], by_handoff: Sequence[Entry]) -> None:
    l, r = st.columns(2)
    with l:
        _bottleneck_panel(by_supplier, "supplier", "Supplier")
    with r:
        _bottleneck_panel(by_handoff, "handoff_point", "Handoff Point")
