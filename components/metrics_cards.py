"""Reusable KPI metric card widgets."""

import streamlit as st
from typing import List

from models.distribution import DistributionTotals
from engine.explainer import fmt_kg


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_totals_row(totals: DistributionTotals):
    render_metric_row([
        {"label": "Per piece", "value": fmt_kg(totals.per_piece_kg)},
        {"label": "Adj. excl. AVI", "value": fmt_kg(totals.adjusted_kg)},
        {"label": "Total incl. AVI", "value": fmt_kg(totals.shown_kg)},
        {"label": "Pieces", "value": f"{totals.pieces:,}"},
    ])


def render_limit_warnings(warnings: List[str]):
    """Single warning card listing every over-limit compartment."""
    if not warnings:
        st.success("All compartments within limits.", icon="🟢")
        return
    lines = "\n".join(f"- {w}" for w in warnings)
    st.warning(f"**Limit warning:**\n{lines}", icon="🟡")
