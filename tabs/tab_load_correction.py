"""Tab 2: Load Correction — manual piece removal from a single compartment."""

import streamlit as st

from models.compartment import Compartment
from models.distribution import DistributionRun
from components.metrics_cards import render_metric_row
from components.tables import render_comparison_table
from data.exporter import comparison_frame
from engine.explainer import explain_correction, fmt_kg


def render(sidebar_state, run: DistributionRun):
    """Render the Load Correction tab."""
    st.header("Load Correction (LMC)")

    report = run.corrected.removal

    render_metric_row([
        {"label": "Target", "value": report.target.value},
        {"label": "Max removable", "value": f"{report.max_removable:,} pcs"},
        {"label": "Removed", "value": f"{report.removed_pieces:,} pcs"},
        {"label": "Removed weight", "value": fmt_kg(report.removed_kg),
         "delta": f"-{fmt_kg(report.removed_kg)}" if report.removed_pieces else None,
         "delta_color": "off"},
    ])

    st.write(explain_correction(report))

    if report.target == Compartment.CP5:
        st.info("Removing from CP5 affects overflow pieces only — AVI remains in CP5.")

    st.divider()

    st.subheader("Before / After")
    render_comparison_table(comparison_frame(run.base, run.corrected))

    delta_kg = run.base.totals.shown_kg - run.corrected.totals.shown_kg
    st.caption(
        f"Total incl. AVI: {fmt_kg(run.base.totals.shown_kg)} → "
        f"{fmt_kg(run.corrected.totals.shown_kg)} (−{fmt_kg(delta_kg)})"
    )
