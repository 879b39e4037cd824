"""Tab 1: Distribution — per-compartment pieces, weights and limits after LMC."""

import streamlit as st

from models.distribution import DistributionRun
from components.metrics_cards import render_totals_row, render_limit_warnings
from components.tables import render_distribution_table
from components.charts import weight_vs_capacity_bar, piece_split_donut
from data.exporter import distribution_frame, frame_to_csv
from engine.explainer import limit_warnings, fmt_kg


def render(sidebar_state, run: DistributionRun):
    """Render the Distribution tab."""
    st.header("Distribution")

    caps = run.capacities
    result = run.corrected

    render_totals_row(result.totals)
    st.caption(f"Adj. total pre-LMC: {fmt_kg(run.base.totals.adjusted_kg)}")

    st.divider()

    df = distribution_frame(result.piece_alloc, result.weights, result.exceeds, caps)
    render_distribution_table(df)
    render_limit_warnings(limit_warnings(result.weights, result.exceeds, caps))

    st.download_button(
        "Download CSV",
        data=frame_to_csv(df),
        file_name="cargo_distribution.csv",
        mime="text/csv",
    )

    st.divider()

    if result.totals.pieces == 0:
        st.info("Enter a piece count to see the distribution charts.")
        return

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(weight_vs_capacity_bar(df), use_container_width=True)
    with col2:
        st.plotly_chart(piece_split_donut(df), use_container_width=True)

    st.caption(
        "Assumptions: uniform piece weight; AVI is single item in CP5; "
        "Overflow moves pieces CP2/3/4 → CP5 → CP1; LMC does not redistribute."
    )
