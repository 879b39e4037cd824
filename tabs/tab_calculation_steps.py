"""Tab 3: Calculation Steps — how the base distribution was derived."""

import streamlit as st

from models.distribution import DistributionRun
from engine.explainer import explain_correction, round_kg


def render(sidebar_state, run: DistributionRun):
    """Render the Calculation Steps tab."""
    st.header("Calculation Steps")

    for step in run.base.explanation_steps:
        st.markdown(f"- {step}")
    st.markdown(f"- {explain_correction(run.corrected.removal)}")

    if run.base.overflow_moves:
        with st.expander("Overflow moves"):
            st.table([
                {
                    "From": m.source.value,
                    "To": m.destination.value,
                    "Pieces": m.pieces,
                    "Weight (kg)": round_kg(m.weight_kg),
                }
                for m in run.base.overflow_moves
            ])
