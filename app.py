"""Cargo Distributor — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from engine.distribution_engine import run_distribution
from config.defaults import LOG_LEVEL, LOG_FORMAT
from tabs import (
    tab_distribution,
    tab_load_correction,
    tab_calculation_steps,
)


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    st.set_page_config(
        page_title="Cargo Distributor",
        page_icon="📦",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()
    run = run_distribution(sidebar_state.inputs)

    tab1, tab2, tab3 = st.tabs([
        "📦 Distribution",
        "✂️ Load Correction",
        "🧮 Calculation Steps",
    ])

    with tab1:
        tab_distribution.render(sidebar_state, run)
    with tab2:
        tab_load_correction.render(sidebar_state, run)
    with tab3:
        tab_calculation_steps.render(sidebar_state, run)


if __name__ == "__main__":
    main()
